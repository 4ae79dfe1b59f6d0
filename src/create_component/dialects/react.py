"""React (JSX) dialect."""

from create_component.dialects.base import Dialect
from create_component.models import UnitType


class ReactDialect(Dialect):
    name = "react"
    extension = ".jsx"
    package = "react"

    def render(
        self,
        name: str,
        kebab_name: str,
        unit_type: UnitType,
        label: str,
        style_label: str = "styles",
    ) -> str:
        return f"""import React from 'react';

const {name} = () => {{
  return (
    <div className="{kebab_name}">
      {{/* {label}: {name} */}}
    </div>
  );
}};

export default {name};
"""

    def route_entry(self, name: str, kebab_name: str, import_path: str) -> str:
        return (
            f"{{ path: '/{kebab_name}', "
            f"element: React.lazy(() => import('{import_path}')) }}"
        )
