import logging

from app.app_state import FormMode, ProfileFormState
from core.preferences import (
    get_profile_photo_uri,
    get_user_email,
    get_user_name,
    save_profile_photo_uri,
    save_user_email,
    save_user_name,
)
from core.validation import is_valid_email, is_valid_name

IMAGE_MIME_FILTER = "image/*"
MY_ORDERS_ROUTE = "my_orders"

SAVED_MESSAGE = "Profile updated"
SAVE_FAILED_MESSAGE = "Please correct the errors"
PHOTO_COPY_FAILED_MESSAGE = "Could not save the selected photo."

log = logging.getLogger(__name__)


class ProfileFormController:
    """Edit/view lifecycle of the profile form.

    Collaborators are injected:
    - store: get(key) / set(key, value) key-value store
    - image_picker: request(mime_filter, callback), callback gets a path or None
    - image_store: copy_to_private_storage(handle, callback) and discard(ref)
    - navigate: callable taking a route name

    on_change receives the state after every mutation, notify receives
    transient user messages, on_photo_error receives image copy failures.
    """

    def __init__(
        self,
        store,
        image_picker,
        image_store,
        navigate=None,
        email_validator=is_valid_email,
        on_change=None,
        notify=None,
        on_photo_error=None,
    ):
        self.store = store
        self.image_picker = image_picker
        self.image_store = image_store
        self.navigate = navigate
        self.email_validator = email_validator
        self.on_change = on_change
        self.notify = notify
        self.on_photo_error = on_photo_error
        self.state = ProfileFormState()

    def _changed(self):
        if self.on_change:
            self.on_change(self.state)

    def _notify(self, message):
        if self.notify:
            self.notify(message)

    def load(self):
        """Mutates: name, email, photo_ref, mode, error flags. Does NOT mutate: store. Returns: ProfileFormState."""
        self.state.name = get_user_name(self.store)
        self.state.email = get_user_email(self.store)
        self.state.photo_ref = get_profile_photo_uri(self.store)
        self.state.mode = FormMode.VIEWING
        self.state.name_error = False
        self.state.email_error = False
        self._changed()
        return self.state

    def set_name(self, value):
        """Mutates: name, name_error (EDITING only). Returns: bool."""
        if not self.state.is_editing:
            return False
        self.state.name = value
        self.state.name_error = not is_valid_name(value)
        self._changed()
        return True

    def set_email(self, value):
        """Mutates: email, email_error (EDITING only). Returns: bool."""
        if not self.state.is_editing:
            return False
        self.state.email = value
        self.state.email_error = not self.email_validator(value)
        self._changed()
        return True

    def _validate(self):
        self.state.name_error = not is_valid_name(self.state.name)
        self.state.email_error = not self.email_validator(self.state.email)
        return not (self.state.name_error or self.state.email_error)

    def toggle_or_save(self):
        """
        VIEWING: enter EDITING, no validation or persistence.
        EDITING: re-validate both fields; persist and return to VIEWING only when valid.
        Returns: (bool, str)
        """
        if not self.state.is_editing:
            self.state.mode = FormMode.EDITING
            self._changed()
            return True, "Editing profile."

        if not self._validate():
            self._changed()
            self._notify(SAVE_FAILED_MESSAGE)
            return False, SAVE_FAILED_MESSAGE

        save_user_name(self.store, self.state.name)
        save_user_email(self.store, self.state.email)
        self.state.mode = FormMode.VIEWING
        log.info("Profile saved")
        self._changed()
        self._notify(SAVED_MESSAGE)
        return True, SAVED_MESSAGE

    def tap_photo(self):
        """Pick a new photo while editing, otherwise open the preview. Returns: (bool, str)."""
        if self.state.is_editing:
            return self.pick_image()
        return self.request_preview()

    def pick_image(self):
        """Mutates: pick_in_flight, later photo_ref. Does NOT mutate: mode. Returns: (bool, str)."""
        if self.state.pick_in_flight:
            log.info("Image pick ignored, another pick is still in progress")
            return False, "Image selection already in progress."

        self.state.pick_in_flight = True
        self._changed()
        try:
            self.image_picker.request(IMAGE_MIME_FILTER, self._on_image_picked)
        except Exception:
            self.state.pick_in_flight = False
            self._changed()
            raise
        return True, "Image selection started."

    def _on_image_picked(self, handle):
        if handle is None:
            self.state.pick_in_flight = False
            self._changed()
            return
        try:
            self.image_store.copy_to_private_storage(handle, self._on_image_copied)
        except Exception:
            log.error("Could not start image copy for %s", handle, exc_info=True)
            self._on_image_copied(None)

    def _on_image_copied(self, photo_ref):
        self.state.pick_in_flight = False
        if photo_ref is None:
            log.warning("Image copy failed, keeping current photo")
            self._changed()
            if self.on_photo_error:
                self.on_photo_error(PHOTO_COPY_FAILED_MESSAGE)
            return

        previous = self.state.photo_ref
        self.state.photo_ref = photo_ref
        save_profile_photo_uri(self.store, photo_ref)
        log.info("Profile photo updated: %s", photo_ref)
        if previous and previous != photo_ref:
            self.image_store.discard(previous)
        self._changed()

    def request_preview(self):
        self.state.preview_visible = True
        self._changed()
        return True, "Preview opened."

    def dismiss_preview(self):
        self.state.preview_visible = False
        self._changed()
        return True, "Preview closed."

    def open_my_orders(self):
        """Mutates: none. Returns: (bool, str)."""
        if self.navigate is None:
            return False, "Navigation unavailable."
        self.navigate(MY_ORDERS_ROUTE)
        return True, "Opening My Orders."
