#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2confluence/options/confluence.py
"""Configuration options for Confluence wiki rendering.

This module defines the bit flags that select optional renderer behaviors
and the frozen options dataclass that carries them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from md2confluence.options.base import BaseRendererOptions


class RenderFlag(IntFlag):
    """Optional behaviors of the Confluence renderer.

    Flags combine with ``|``. The absence of every flag (``NONE``) gives
    plain code-block tagging and full escaping.

    Attributes
    ----------
    NONE
        No optional behavior
    INFORMATION_MACROS
        Render fenced code blocks tagged ``info``, ``tip``, ``note`` or
        ``warning`` as the matching Confluence macro instead of ``{code}``
    IGNORE_MACRO_ESCAPING
        Leave ``{`` unescaped in text so wiki macros written in the
        markdown source pass through intact

    """

    NONE = 0
    INFORMATION_MACROS = 1 << 1
    IGNORE_MACRO_ESCAPING = 1 << 2


ALL_RENDER_FLAGS = RenderFlag.INFORMATION_MACROS | RenderFlag.IGNORE_MACRO_ESCAPING


@dataclass(frozen=True)
class ConfluenceRendererOptions(BaseRendererOptions):
    r"""Configuration options for Confluence wiki rendering.

    Parameters
    ----------
    flags : RenderFlag, default RenderFlag.NONE
        Bit set of optional behaviors. Plain integers are accepted and
        coerced; unknown bits are rejected.

    Examples
    --------
    Enabling both behaviors:
        >>> options = ConfluenceRendererOptions(
        ...     flags=RenderFlag.INFORMATION_MACROS | RenderFlag.IGNORE_MACRO_ESCAPING
        ... )
        >>> options.information_macros
        True

    """

    flags: RenderFlag = field(
        default=RenderFlag.NONE,
        metadata={
            "help": "Bit set of optional behaviors (INFORMATION_MACROS, IGNORE_MACRO_ESCAPING)",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Coerce and validate the flag set.

        Raises
        ------
        ValueError
            If ``flags`` contains bits outside the known flags.

        """
        super().__post_init__()
        flags = int(self.flags)
        if flags & ~int(ALL_RENDER_FLAGS):
            raise ValueError(f"Unknown render flag bits: {flags & ~int(ALL_RENDER_FLAGS):#x}")
        object.__setattr__(self, "flags", RenderFlag(flags))

    @property
    def information_macros(self) -> bool:
        """Whether information macros are enabled."""
        return bool(self.flags & RenderFlag.INFORMATION_MACROS)

    @property
    def ignore_macro_escaping(self) -> bool:
        """Whether the macro delimiter is exempt from escaping."""
        return bool(self.flags & RenderFlag.IGNORE_MACRO_ESCAPING)
