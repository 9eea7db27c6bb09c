"""Configuration read from the configuration zettel while running."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .meta import (
    KEY_DEFAULT_COPYRIGHT,
    KEY_DEFAULT_LANG,
    KEY_DEFAULT_LICENSE,
    KEY_DEFAULT_ROLE,
    KEY_DEFAULT_SYNTAX,
    KEY_DEFAULT_TITLE,
    KEY_ICON_MATERIAL,
    KEY_SITE_NAME,
    KEY_START,
    KEY_YAML_HEADER,
    KEY_ZETTEL_FILE_SYNTAX,
    Meta,
)
from .zettel import (
    INVALID_ZETTEL_ID,
    MATERIAL_ICON_ID,
    InvalidZettelIDError,
    ZettelID,
    parse_zettel_id,
)


@dataclass
class RuntimeConfig:
    """Values of the configuration zettel, with defaults for missing keys."""

    meta: Optional[Meta] = None

    def _value(self, key: str, default: str) -> str:
        if self.meta is None:
            return default
        return self.meta.get_default(key, default)

    def default_title(self) -> str:
        """Return the value of 'default-title'."""
        return self._value(KEY_DEFAULT_TITLE, "Untitled")

    def default_syntax(self) -> str:
        """Return the value of 'default-syntax'."""
        return self._value(KEY_DEFAULT_SYNTAX, "zmk")

    def default_role(self) -> str:
        """Return the value of 'default-role'."""
        return self._value(KEY_DEFAULT_ROLE, "zettel")

    def default_lang(self) -> str:
        """Return the value of 'default-lang'."""
        return self._value(KEY_DEFAULT_LANG, "en")

    def default_copyright(self) -> str:
        """Return the value of 'default-copyright'."""
        return self._value(KEY_DEFAULT_COPYRIGHT, "")

    def default_license(self) -> str:
        """Return the value of 'default-license'."""
        return self._value(KEY_DEFAULT_LICENSE, "")

    def site_name(self) -> str:
        """Return the value of 'site-name'."""
        return self._value(KEY_SITE_NAME, "Zettelstore")

    def start(self) -> ZettelID:
        """Return the zettel id given by 'start', or the invalid id."""
        if self.meta is None:
            return INVALID_ZETTEL_ID
        text = self.meta.get(KEY_START)
        if text is None:
            return INVALID_ZETTEL_ID
        try:
            return parse_zettel_id(text)
        except InvalidZettelIDError:
            return INVALID_ZETTEL_ID

    def yaml_header(self) -> bool:
        """Return the value of 'yaml-header' as a boolean."""
        return self.meta is not None and self.meta.get_bool(KEY_YAML_HEADER)

    def zettel_file_syntax(self) -> list[str]:
        """Return the syntaxes listed in 'zettel-file-syntax'."""
        if self.meta is None:
            return []
        return self.meta.get_list(KEY_ZETTEL_FILE_SYNTAX) or []

    def icon_material(self, url_prefix: str) -> str:
        """Return the HTML used as icon for external material."""
        if self.meta is not None:
            html = self.meta.get(KEY_ICON_MATERIAL)
            if html is not None:
                return html
        return (
            f'<img class="zs-text-icon" src="{url_prefix}z/'
            f'{MATERIAL_ICON_ID.format()}?_part=content&_format=raw">'
        )