"""Profile preference keys and typed accessors over the key-value store."""

USER_NAME_KEY = "user_name"
USER_EMAIL_KEY = "user_email"
PROFILE_PHOTO_URI_KEY = "profile_photo_uri"


def get_user_name(store):
    return store.get(USER_NAME_KEY) or ""


def save_user_name(store, name):
    store.set(USER_NAME_KEY, name)


def get_user_email(store):
    return store.get(USER_EMAIL_KEY) or ""


def save_user_email(store, email):
    store.set(USER_EMAIL_KEY, email)


def get_profile_photo_uri(store):
    """Return the stored photo reference, or None for the default image."""
    return store.get(PROFILE_PHOTO_URI_KEY) or None


def save_profile_photo_uri(store, photo_ref):
    store.set(PROFILE_PHOTO_URI_KEY, photo_ref)
