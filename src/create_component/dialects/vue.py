"""Vue single-file component dialect."""

from create_component.dialects.base import Dialect
from create_component.models import UnitType


class VueDialect(Dialect):
    name = "vue"
    extension = ".vue"
    package = "vue"
    # Bundlers do not resolve .vue files without the extension
    import_with_extension = True

    def render(
        self,
        name: str,
        kebab_name: str,
        unit_type: UnitType,
        label: str,
        style_label: str = "styles",
    ) -> str:
        return f"""<template>
  <div class="{kebab_name}">
    <!-- {label}: {name} -->
  </div>
</template>

<script>
export default {{
  name: '{name}'
}}
</script>

<style scoped>
.{kebab_name} {{
  /* {style_label} */
}}
</style>
"""

    def route_entry(self, name: str, kebab_name: str, import_path: str) -> str:
        return f"{{ path: '/{kebab_name}', component: () => import('{import_path}') }}"
