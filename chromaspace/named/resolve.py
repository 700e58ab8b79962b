from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional, Type, Union

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase
    from ..spaces.base import ColorSpace


def resolve(
    identifier: str,
    *args: Any,
    space: Union[str, Type["ColorSpace"]] = "rgb",
    color_class: Optional[Type["ColorBase"]] = None,
) -> "ColorBase":
    """
    Build a color from a named color or a color space name.

    Named colors win over a color space registered under the same name.
    See :meth:`ColorBase.resolve`.

    Args:
        identifier: Named color or registered space name
        *args: Channel values when ``identifier`` is a space
        space: Space of the named color
        color_class: Color variant to build (default :class:`Color`)
    """
    if color_class is None:
        from ..colors.color import Color as color_class
    return color_class.resolve(identifier, *args, space=space)
