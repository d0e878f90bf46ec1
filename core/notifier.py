import logging
import time

from plyer import notification

APP_NAME = "ShopSmart"

_last_toast = {"message": None, "at": 0.0}


def toast(message, cooldown=0.0):
    """Show a short desktop notification.

    Every call notifies unless a cooldown is given, in which case an identical
    message repeated inside it is dropped.
    """
    now = time.time()

    if message == _last_toast["message"] and now - _last_toast["at"] < cooldown:
        return

    _last_toast["message"] = message
    _last_toast["at"] = now

    try:
        notification.notify(
            title=APP_NAME,
            message=message,
            app_name=APP_NAME,
            timeout=2
        )
    except Exception:
        logging.error("Notification backend failure", exc_info=True)
