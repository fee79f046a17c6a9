"""ABOUTME: Translation utilities for i18n/l10n support
ABOUTME: Provides gettext functions that use Flask-Babel inside an app and pass text through outside one"""

from typing import Any

from flask import current_app, has_app_context
from flask_babel import LazyString
from flask_babel import gettext as flask_gettext


def gettext(message: str, **kwargs: Any) -> str:
    """Get translated string - Flask-Babel when the app has it, otherwise the message itself."""
    if has_app_context() and "babel" in current_app.extensions:
        return str(flask_gettext(message, **kwargs))

    return message % kwargs if kwargs else message


def lazy_gettext(message: str, **kwargs: Any) -> LazyString:  # type: ignore[no-any-unimported]
    """Get lazy translated string, resolved each time it is rendered."""
    return LazyString(gettext, message, **kwargs)


_ = gettext
_l = lazy_gettext
