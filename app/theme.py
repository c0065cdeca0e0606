from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Iterable, Mapping


class ColorMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ThemeDescriptor:
    label: str
    value: str
    color_mode: ColorMode
    icon: str
    description: str

    def __post_init__(self) -> None:
        for field_name in ("label", "value", "icon", "description"):
            if not getattr(self, field_name):
                raise ValueError(f"Theme {field_name} must not be empty.")
        # Frozen: coerce plain strings through object.__setattr__.
        object.__setattr__(self, "color_mode", ColorMode(self.color_mode))

    @property
    def key(self) -> str:
        return self.value

    def to_summary(self) -> dict[str, str]:
        return {
            "label": self.label,
            "value": self.value,
            "icon": self.icon,
            "color_mode": self.color_mode.value,
            "description": self.description,
        }


def _build_registry(
    entries: Iterable[tuple[str, ThemeDescriptor]],
) -> Mapping[str, ThemeDescriptor]:
    """Index declared themes by key, failing fast on malformed entries.

    Declaration order is kept. A key that does not match its descriptor's
    ``value`` or that is declared twice raises ``ValueError`` at import.
    """
    registry: dict[str, ThemeDescriptor] = {}
    for key, theme in entries:
        if key in registry:
            raise ValueError(f"Duplicate theme key: {key!r}.")
        if theme.value != key:
            raise ValueError(
                f"Theme key {key!r} does not match descriptor value {theme.value!r}."
            )
        registry[key] = theme
    if not registry:
        raise ValueError("Theme registry must declare at least one theme.")
    return MappingProxyType(registry)


def _theme(
    value: str,
    label: str,
    color_mode: ColorMode,
    icon: str,
    description: str,
) -> tuple[str, ThemeDescriptor]:
    return value, ThemeDescriptor(
        label=label,
        value=value,
        color_mode=color_mode,
        icon=icon,
        description=description,
    )


_THEMES_BY_KEY: Final[Mapping[str, ThemeDescriptor]] = _build_registry(
    (
        _theme("wechat", "微信公众号", ColorMode.LIGHT, "📱", "适合微信公众号文章排版"),
        _theme("aiarticle", "AI文章", ColorMode.LIGHT, "🤖", "AI 生成文章风格，科技感十足"),
        _theme("readingnotes", "读书笔记", ColorMode.LIGHT, "📚", "读书笔记风格，优雅阅读体验"),
        _theme("xiaohongshu", "小红书卡片", ColorMode.LIGHT, "📕", "卡片式设计，渐变色标题"),
        _theme("github", "GitHub", ColorMode.LIGHT, "💻", "GitHub 风格，简洁专业"),
        _theme("notion", "Notion", ColorMode.LIGHT, "📝", "Notion 风格，现代简洁"),
        _theme("typora", "Typora", ColorMode.LIGHT, "✍️", "Typora 风格，优雅阅读"),
        _theme("dark", "暗色主题", ColorMode.DARK, "🌙", "护眼暗色模式"),
        _theme("dracula", "Dracula", ColorMode.DARK, "🧛", "Dracula 暗色主题"),
        _theme("material", "Material", ColorMode.LIGHT, "🎨", "Material Design 风格"),
        # doocs/md family
        _theme("doocs", "Doocs 简约", ColorMode.LIGHT, "✨", "doocs/md 简约风格"),
        _theme("doocsTech", "Doocs 科技", ColorMode.LIGHT, "⚡", "doocs/md 科技风格"),
        _theme("doocsArt", "Doocs 文艺", ColorMode.LIGHT, "🎭", "doocs/md 文艺风格"),
        _theme("doocsBusiness", "Doocs 商务", ColorMode.LIGHT, "💼", "doocs/md 商务风格"),
        _theme("doocsFresh", "Doocs 清新", ColorMode.LIGHT, "🌿", "doocs/md 清新风格"),
        _theme("doocsWarm", "Doocs 温暖", ColorMode.LIGHT, "☀️", "doocs/md 温暖风格"),
        _theme("doocsCool", "Doocs 冷色", ColorMode.LIGHT, "❄️", "doocs/md 冷色风格"),
    )
)
THEMES: Final[tuple[ThemeDescriptor, ...]] = tuple(_THEMES_BY_KEY.values())
DEFAULT_THEME_KEY: Final[str] = THEMES[0].value
DEFAULT_THEME: Final[ThemeDescriptor] = THEMES[0]


def list_themes() -> list[ThemeDescriptor]:
    return list(THEMES)


def get_theme(key: str | None) -> ThemeDescriptor:
    if key is None:
        return DEFAULT_THEME
    return _THEMES_BY_KEY.get(key, DEFAULT_THEME)


def is_registered_theme(key: str | None) -> bool:
    return key is not None and key in _THEMES_BY_KEY


def resolve_theme(candidate: str | None) -> str:
    if is_registered_theme(candidate):
        return candidate
    return DEFAULT_THEME_KEY
