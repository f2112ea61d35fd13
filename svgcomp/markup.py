"""
SVG markup rewriting.

Markup is split into tokens on real tag boundaries (tags with their name and
attribute list, text, comments, declarations). Rewrites edit tokens and only
changed tags are re-rendered, so untouched markup is reproduced byte for byte.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import MarkupRewriteError
from .models import Binding, Framework
from .utils.logger import get_logger
from .utils.naming import camel_case

logger = get_logger(__name__)

TAG = "tag"
TEXT = "text"
COMMENT = "comment"
CDATA = "cdata"
DECLARATION = "declaration"

_TOKEN_PATTERN = re.compile(
    r'''
      (?P<comment><!--.*?-->)
    | (?P<cdata><!\[CDATA\[.*?\]\]>)
    | (?P<declaration><[?!][^>]*>)
    | (?P<tag></?[A-Za-z][^\s/>]*
        (?:\s+[^\s=/>]+(?:\s*=\s*(?:"[^"]*"|'[^']*'|\{[^}]*\}|[^\s"'>]+))?)*
        \s*/?>)
    ''',
    re.S | re.X,
)

_TAG_PARTS = re.compile(r'<(/)?([A-Za-z][^\s/>]*)(.*?)(/)?\s*>$', re.S)

_ATTR_PATTERN = re.compile(
    r'''([^\s=/>]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|\{([^}]*)\}|([^\s"'>]+)))?''',
    re.S,
)

_JSX_TEXT_ESCAPE = re.compile(r'[{}<>]')
_VUE_TEXT_ESCAPE = re.compile(r'\{\{')


@dataclass
class Attribute:
    """A single attribute of a tag."""
    name: str
    value: Optional[str] = None
    binding: Binding = Binding.STRING
    quote: str = '"'

    def render(self) -> str:
        if self.value is None:
            return self.name
        if self.binding is Binding.EXPRESSION:
            return f"{self.name}={{{self.value}}}"
        if self.binding is Binding.BOUND:
            return f':{self.name}="{self.value}"'
        return f"{self.name}={self.quote}{self.value}{self.quote}"


@dataclass
class Token:
    """A slice of markup."""
    kind: str
    raw: str
    name: str = ""
    attributes: List[Attribute] = field(default_factory=list)
    closing: bool = False
    self_closing: bool = False
    dirty: bool = False

    @property
    def is_open_tag(self) -> bool:
        return self.kind == TAG and not self.closing

    def opens(self, element: str) -> bool:
        return self.is_open_tag and self.name == element

    def closes(self, element: str) -> bool:
        return self.kind == TAG and self.closing and self.name == element

    def get_attribute(self, name: str) -> Optional[Attribute]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def render(self) -> str:
        if self.kind != TAG or not self.dirty:
            return self.raw
        if self.closing:
            return f"</{self.name}>"
        attrs = "".join(f" {attribute.render()}" for attribute in self.attributes)
        return f"<{self.name}{attrs}{' /' if self.self_closing else ''}>"


def _parse_attributes(text: str) -> List[Attribute]:
    attributes = []
    for match in _ATTR_PATTERN.finditer(text):
        name, double, single, expression, bare = match.groups()
        binding = Binding.STRING
        quote = '"'
        value: Optional[str] = None

        if double is not None:
            value = double
        elif single is not None:
            value, quote = single, "'"
        elif expression is not None:
            value, binding = expression, Binding.EXPRESSION
        elif bare is not None:
            value = bare

        if name.startswith(":") and value is not None:
            name, binding = name[1:], Binding.BOUND

        attributes.append(Attribute(name=name, value=value, binding=binding, quote=quote))
    return attributes


def _parse_tag(raw: str) -> Token:
    parts = _TAG_PARTS.match(raw)
    if not parts:
        return Token(kind=TEXT, raw=raw)

    closing, name, attrs, self_closing = parts.groups()
    return Token(
        kind=TAG,
        raw=raw,
        name=name,
        attributes=_parse_attributes(attrs) if not closing else [],
        closing=bool(closing),
        self_closing=bool(self_closing),
    )


def tokenize(markup: str) -> List[Token]:
    """
    Split markup into tokens.

    Args:
        markup: SVG (or SVG-like template) source

    Returns:
        Tokens whose concatenated raw text equals the input
    """
    tokens: List[Token] = []
    position = 0

    for match in _TOKEN_PATTERN.finditer(markup):
        if match.start() > position:
            tokens.append(Token(kind=TEXT, raw=markup[position:match.start()]))

        kind = match.lastgroup
        raw = match.group()
        if kind == TAG:
            tokens.append(_parse_tag(raw))
        else:
            tokens.append(Token(kind=kind, raw=raw))
        position = match.end()

    if position < len(markup):
        tokens.append(Token(kind=TEXT, raw=markup[position:]))

    return tokens


def render(tokens: List[Token]) -> str:
    """Join tokens back into markup."""
    return "".join(token.render() for token in tokens)


def has_element(markup: str, element: str) -> bool:
    """Check whether an opening tag of the element exists."""
    return any(token.opens(element) for token in tokenize(markup))


def strip_prolog(markup: str) -> str:
    """
    Remove the XML declaration, doctype and comments.

    None of them are valid inside a JSX expression or a Vue template.
    """
    tokens = [token for token in tokenize(markup) if token.kind not in (COMMENT, DECLARATION)]
    return render(tokens).strip()


def escape_text(markup: str, framework: Framework) -> str:
    """
    Escape text content that the host template syntax would interpret.

    Args:
        markup: SVG markup
        framework: Target framework

    Returns:
        Markup with braces and angle brackets in text nodes escaped
    """
    tokens = tokenize(markup)
    for token in tokens:
        # JSX has no CDATA, its content becomes plain text
        if token.kind == CDATA and framework is Framework.REACT:
            token.kind, token.raw = TEXT, token.raw[len("<![CDATA["):-len("]]>")]
        if token.kind != TEXT:
            continue
        if framework is Framework.REACT:
            token.raw = _JSX_TEXT_ESCAPE.sub(lambda m: f"{{'{m.group()}'}}", token.raw)
        else:
            token.raw = _VUE_TEXT_ESCAPE.sub("{{ '{{' }}", token.raw)
    return render(tokens)


def convert_attribute_names(markup: str, class_attribute: str = "className") -> str:
    """
    Rewrite attribute names to camelCase.

    "stroke-width" becomes "strokeWidth", "xlink:href" becomes "xlinkHref" and
    "class" becomes class_attribute. Values are left untouched.

    Args:
        markup: SVG markup
        class_attribute: Name used in place of "class"

    Returns:
        Rewritten markup
    """
    tokens = tokenize(markup)
    for token in tokens:
        if not token.is_open_tag:
            continue
        for attribute in token.attributes:
            if attribute.binding is not Binding.STRING:
                continue
            new_name = class_attribute if attribute.name == "class" else camel_case(attribute.name)
            if new_name and new_name != attribute.name:
                attribute.name = new_name
                token.dirty = True
    return render(tokens)


def add_prop(
    markup: str,
    target_element: str,
    prop_name: str,
    value: str,
    binding: Binding = Binding.EXPRESSION,
    first_only: bool = False,
) -> str:
    """
    Bind a prop on every occurrence of an element.

    An existing attribute of the same (camelCased) name is replaced in place,
    otherwise the binding is appended after the last attribute.

    Args:
        markup: SVG markup
        target_element: Element name, e.g. "path"
        prop_name: Attribute name, e.g. "fill"
        value: Bound expression or string value
        binding: Rendering of the binding
        first_only: Only rewrite the first occurrence

    Returns:
        Rewritten markup

    Raises:
        MarkupRewriteError: If the element does not occur in the markup
    """
    name = camel_case(prop_name) if binding is not Binding.BOUND else prop_name
    tokens = tokenize(markup)
    targets = [token for token in tokens if token.opens(target_element)]

    if not targets:
        raise MarkupRewriteError(f"No <{target_element}> element to bind '{name}' on", target_element)

    if first_only:
        targets = targets[:1]

    for token in targets:
        existing = token.get_attribute(name)
        if existing:
            existing.value = value
            existing.binding = binding
        else:
            token.attributes.append(Attribute(name=name, value=value, binding=binding))
        token.dirty = True

    logger.debug(f"Bound {name} on {len(targets)} <{target_element}> element(s)")
    return render(tokens)


def add_element(markup: str, element_name: str, content: str, sibling: str) -> str:
    """
    Insert a child element before the first sibling element.

    Falls back to inserting before the root's closing </svg> tag when the
    sibling does not occur.

    Args:
        markup: SVG markup
        element_name: Element to insert, e.g. "title"
        content: Inner content of the new element
        sibling: Element to insert before, e.g. "path"

    Returns:
        Rewritten markup

    Raises:
        MarkupRewriteError: If neither the sibling nor </svg> occurs
    """
    element = Token(kind=TEXT, raw=f"<{element_name}>{content}</{element_name}>")
    tokens = tokenize(markup)

    for index, token in enumerate(tokens):
        if token.opens(sibling):
            tokens.insert(index, element)
            return render(tokens)

    for index in range(len(tokens) - 1, -1, -1):
        if tokens[index].closes("svg"):
            tokens.insert(index, element)
            return render(tokens)

    raise MarkupRewriteError(f"No <{sibling}> or </svg> to place <{element_name}> at", element_name)


def remove_element(markup: str, element_name: str) -> str:
    """Remove every occurrence of an element together with its content."""
    tokens = tokenize(markup)
    kept: List[Token] = []
    depth = 0

    for token in tokens:
        if depth == 0:
            if token.opens(element_name):
                if not token.self_closing:
                    depth = 1
                continue
            kept.append(token)
            continue

        if token.opens(element_name) and not token.self_closing:
            depth += 1
        elif token.closes(element_name):
            depth -= 1

    return render(kept)
