# lw_webdriver/decorators/ensure.py
import functools

from ..client import commands
from ..errors import WebdriverError
from ..handles import SessionHandle, TabId

import logging
logger = logging.getLogger(__name__)


def ensure_selected(session: SessionHandle, tab_id: TabId) -> None:
    """
    Make ``tab_id`` the active window of the session.

    The active window is only known to the driver and any other Tab or Element
    may have changed it, so it is read back first. A failed read falls through
    to an explicit select; select errors propagate unchanged.
    """
    session.check_open()
    try:
        if commands.get_selected_tab(session.client, session.id) == tab_id:
            return
    except WebdriverError as e:
        logger.debug(f"could not read the active tab, selecting {tab_id} anyway: {e!r}")

    commands.select_tab(session.client, session.id, tab_id)


def ensure_tab_selected(_func=None):
    """
    Run ``self.select()`` before the wrapped Tab/Element method.

    A selection failure is raised and the wrapped command is not attempted.
    """
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            self.select()
            return fn(self, *args, **kwargs)
        return wrapper
    return decorator if _func is None else decorator(_func)
