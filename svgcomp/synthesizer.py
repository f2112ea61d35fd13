"""
Component synthesis: wraps rewritten SVG markup in a React or Vue component.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from string import Template
from typing import Dict, Optional

from . import markup
from .models import Binding, ComponentDefaults, Framework
from .utils.logger import get_logger

logger = get_logger(__name__)


REACT_TEMPLATE = Template("""\
import React from 'react';

export interface Props {
  className?: string;
  color?: string;
  title?: string;
}

const $name = ({ className, color = $color, title = $title }: Props) => {
  return (
    $body
  );
};

export default $name;
""")

VUE_TEMPLATE = Template("""\
<script lang="ts">
import { defineComponent } from 'vue';

export default defineComponent({
  name: $name_literal,
  props: {
    color: {
      type: String,
      default: $color,
    },
    title: {
      type: String,
      default: $title,
    },
  },
});
</script>

<template>
  $body
</template>
""")


def js_string(value: str) -> str:
    """Render a value as a single-quoted JS string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


@dataclass(frozen=True)
class ComponentTemplate:
    """A component template with named slots, rendered once."""
    framework: Framework
    template: Template

    def render(self, name: str, color: str, title: str, body: str) -> str:
        slots: Dict[str, str] = {
            "name": name,
            "name_literal": js_string(name),
            "color": js_string(color),
            "title": js_string(title),
            "body": body,
        }
        return self.template.substitute(slots)


TEMPLATES = {
    Framework.REACT: ComponentTemplate(Framework.REACT, REACT_TEMPLATE),
    Framework.VUE: ComponentTemplate(Framework.VUE, VUE_TEMPLATE),
}


class ComponentSynthesizer:
    """Builds component source for one framework from SVG markup."""

    def __init__(self, framework: Framework, defaults: Optional[ComponentDefaults] = None) -> None:
        """
        Initialize the synthesizer.

        Args:
            framework: Target framework
            defaults: Default prop values
        """
        self.framework = framework
        self.defaults = defaults or ComponentDefaults()
        self.template = TEMPLATES[framework]

    def rewrite(self, name: str, svg: str) -> str:
        """
        Bind the component props into the SVG markup.

        Args:
            name: Component name
            svg: Raw SVG source

        Returns:
            Rewritten SVG body

        Raises:
            MarkupRewriteError: If the markup has no <svg> root to bind on
        """
        body = markup.strip_prolog(svg)
        body = markup.escape_text(body, self.framework)
        body = markup.remove_element(body, "title")

        # Icons without paths get their color on the root element
        fill_target = "path" if markup.has_element(body, "path") else "svg"

        if self.framework is Framework.REACT:
            body = markup.convert_attribute_names(body)
            body = markup.add_prop(body, fill_target, "fill", "color", Binding.EXPRESSION)
            body = markup.add_prop(body, "svg", "className", "className", Binding.EXPRESSION,
                                   first_only=True)
            body = markup.add_element(body, "title", "{title}", "path")
        else:
            default_color = js_string(self.defaults.color)
            default_title = js_string(self.defaults.title_for(name))
            body = markup.add_prop(body, fill_target, "fill", f"color || {default_color}",
                                   Binding.BOUND)
            body = markup.add_element(body, "title", f"{{{{ title || {default_title} }}}}", "path")

        return body

    def synthesize(self, name: str, svg: str) -> str:
        """
        Produce the full component source.

        Args:
            name: Component name
            svg: Raw SVG source

        Returns:
            Unformatted component source
        """
        body = self.rewrite(name, svg)
        source = self.template.render(
            name=name,
            color=self.defaults.color,
            title=self.defaults.title_for(name),
            body=body,
        )
        logger.debug(f"Synthesized {self.framework.value} component {name}")
        return source
