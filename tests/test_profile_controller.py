"""Profile form controller tests: load, edit, validate, save and photo flow."""
import os
import tempfile
import unittest
from pathlib import Path

from app.app_state import FormMode
from app.controllers.profile_controller import (
    IMAGE_MIME_FILTER,
    MY_ORDERS_ROUTE,
    PHOTO_COPY_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    SAVED_MESSAGE,
    ProfileFormController,
)
from core import storage
from core.preferences import PROFILE_PHOTO_URI_KEY, USER_EMAIL_KEY, USER_NAME_KEY


class FakeImagePicker:
    """Holds the callback until the test resolves it."""

    def __init__(self):
        self.requests = []
        self.pending = None

    def request(self, mime_filter, callback):
        self.requests.append(mime_filter)
        self.pending = callback

    def resolve(self, handle):
        callback, self.pending = self.pending, None
        callback(handle)


class FakeImageStore:
    def __init__(self):
        self.copies = []
        self.discarded = []
        self.pending = None

    def copy_to_private_storage(self, handle, callback):
        self.copies.append(handle)
        self.pending = callback

    def resolve(self, photo_ref):
        callback, self.pending = self.pending, None
        callback(photo_ref)

    def discard(self, photo_ref):
        self.discarded.append(photo_ref)


class ProfileControllerTests(unittest.TestCase):
    """Validate the edit/view lifecycle against a temporary SQLite store."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.original_cwd = os.getcwd()
        os.chdir(self.temp_dir.name)
        os.environ["APP_DB_PATH"] = str(Path(self.temp_dir.name) / "Data" / "app.db")

        self.store = storage.KeyValueStore()
        self.picker = FakeImagePicker()
        self.image_store = FakeImageStore()
        self.routes = []
        self.messages = []
        self.photo_errors = []
        self.renders = 0
        self.controller = ProfileFormController(
            self.store,
            self.picker,
            self.image_store,
            navigate=self.routes.append,
            on_change=self._on_change,
            notify=self.messages.append,
            on_photo_error=self.photo_errors.append,
        )

    def tearDown(self):
        os.chdir(self.original_cwd)
        os.environ.pop("APP_DB_PATH", None)

    def _on_change(self, state):
        self.renders += 1

    def _editing(self, name="", email=""):
        self.store.set(USER_NAME_KEY, name)
        self.store.set(USER_EMAIL_KEY, email)
        self.controller.load()
        self.controller.toggle_or_save()
        return self.controller.state

    def test_load_fresh_store_defaults(self):
        """Missing keys load as empty fields and no photo."""
        state = self.controller.load()
        self.assertEqual(state.name, "")
        self.assertEqual(state.email, "")
        self.assertIsNone(state.photo_ref)
        self.assertEqual(state.mode, FormMode.VIEWING)
        self.assertFalse(state.name_error)
        self.assertFalse(state.email_error)

    def test_load_reads_stored_values(self):
        """Stored name, email and photo populate the state."""
        self.store.set(USER_NAME_KEY, "Carol")
        self.store.set(USER_EMAIL_KEY, "carol@example.com")
        self.store.set(PROFILE_PHOTO_URI_KEY, "/photos/carol.png")
        state = self.controller.load()
        self.assertEqual(state.name, "Carol")
        self.assertEqual(state.email, "carol@example.com")
        self.assertEqual(state.photo_ref, "/photos/carol.png")

    def test_load_is_idempotent(self):
        """Loading twice from an unchanged store yields identical state."""
        self.store.set(USER_NAME_KEY, "Dana")
        first = self.controller.load()
        snapshot = (first.name, first.email, first.photo_ref, first.mode, first.name_error, first.email_error)
        second = self.controller.load()
        self.assertEqual(
            snapshot,
            (second.name, second.email, second.photo_ref, second.mode, second.name_error, second.email_error),
        )
        self.assertEqual(storage.list_keys(), [USER_NAME_KEY])

    def test_toggle_from_viewing_enters_editing_without_persisting(self):
        """Primary button in VIEWING only switches mode."""
        self.controller.load()
        success, _ = self.controller.toggle_or_save()
        self.assertTrue(success)
        self.assertEqual(self.controller.state.mode, FormMode.EDITING)
        self.assertFalse(self.controller.state.name_error)
        self.assertFalse(self.controller.state.email_error)
        self.assertEqual(storage.list_keys(), [])
        self.assertEqual(self.messages, [])

    def test_edits_ignored_while_viewing(self):
        """Field edits are rejected outside EDITING."""
        self.controller.load()
        self.assertFalse(self.controller.set_name("Eve"))
        self.assertFalse(self.controller.set_email("eve@example.com"))
        self.assertEqual(self.controller.state.name, "")
        self.assertEqual(self.controller.state.email, "")

    def test_name_error_tracks_emptiness(self):
        """name_error is true iff the name is empty."""
        self._editing()
        for value, expected in [("", True), ("a", False), (" ", False), ("Bob", False)]:
            self.controller.set_name(value)
            self.assertEqual(self.controller.state.name_error, expected, value)

    def test_email_error_tracks_validity(self):
        """email_error is the negation of the email check."""
        self._editing()
        cases = [
            ("a@b.com", False),
            ("user.name+tag@sub.domain.co", False),
            ("", True),
            ("noatsign.com", True),
            ("a@b", True),
            ("a@@b.com", True),
        ]
        for value, expected in cases:
            self.controller.set_email(value)
            self.assertEqual(self.controller.state.email_error, expected, value)

    def test_save_guard_with_empty_name(self):
        """Saving with an empty name never persists or leaves EDITING."""
        self._editing()
        self.controller.set_name("")
        self.controller.set_email("valid@example.com")
        success, message = self.controller.toggle_or_save()
        self.assertFalse(success)
        self.assertEqual(message, SAVE_FAILED_MESSAGE)
        self.assertEqual(self.controller.state.mode, FormMode.EDITING)
        self.assertTrue(self.controller.state.name_error)
        self.assertEqual(self.store.get(USER_NAME_KEY), "")
        self.assertEqual(self.store.get(USER_EMAIL_KEY), "")
        self.assertEqual(self.messages, [SAVE_FAILED_MESSAGE])

    def test_save_success_persists_verbatim(self):
        """Valid fields are persisted and the form returns to VIEWING."""
        self._editing()
        self.controller.set_name("Alice")
        self.controller.set_email("alice@example.com")
        success, message = self.controller.toggle_or_save()
        self.assertTrue(success)
        self.assertEqual(message, SAVED_MESSAGE)
        self.assertEqual(self.controller.state.mode, FormMode.VIEWING)
        self.assertEqual(self.store.get(USER_NAME_KEY), "Alice")
        self.assertEqual(self.store.get(USER_EMAIL_KEY), "alice@example.com")
        self.assertEqual(self.messages, [SAVED_MESSAGE])

    def test_immediate_save_revalidates_loaded_values(self):
        """A fresh profile saved without edits fails on the email check."""
        self.controller.load()
        self.controller.toggle_or_save()
        success, _ = self.controller.toggle_or_save()
        self.assertFalse(success)
        self.assertTrue(self.controller.state.email_error)
        self.assertTrue(self.controller.state.name_error)
        self.assertEqual(self.controller.state.mode, FormMode.EDITING)
        self.assertEqual(storage.list_keys(), [])

    def test_custom_email_validator(self):
        """The email check can be swapped."""
        self.controller.email_validator = lambda value: value.endswith("@corp")
        self._editing()
        self.controller.set_email("x@corp")
        self.assertFalse(self.controller.state.email_error)
        self.controller.set_email("x@example.com")
        self.assertTrue(self.controller.state.email_error)

    def test_end_to_end_fresh_profile(self):
        """Fresh store through edit and save ends with stored values."""
        state = self.controller.load()
        self.assertEqual((state.name, state.email, state.photo_ref), ("", "", None))
        self.controller.toggle_or_save()
        self.assertEqual(state.mode, FormMode.EDITING)
        self.controller.set_name("Bob")
        self.controller.set_email("bob@test.com")
        self.controller.toggle_or_save()
        self.assertEqual(state.mode, FormMode.VIEWING)
        self.assertEqual(self.store.get(USER_NAME_KEY), "Bob")
        self.assertEqual(self.store.get(USER_EMAIL_KEY), "bob@test.com")

    def test_pick_image_while_viewing_updates_photo(self):
        """A successful pick persists the photo regardless of mode."""
        self.controller.load()
        success, _ = self.controller.pick_image()
        self.assertTrue(success)
        self.assertEqual(self.picker.requests, [IMAGE_MIME_FILTER])
        self.picker.resolve("/home/user/cat.png")
        self.assertEqual(self.image_store.copies, ["/home/user/cat.png"])
        self.image_store.resolve("/private/profile_1.png")

        state = self.controller.state
        self.assertEqual(state.mode, FormMode.VIEWING)
        self.assertEqual(state.photo_ref, "/private/profile_1.png")
        self.assertFalse(state.pick_in_flight)
        self.assertEqual(self.store.get(PROFILE_PHOTO_URI_KEY), "/private/profile_1.png")
        self.assertEqual(self.store.get(USER_NAME_KEY), None)

    def test_pick_cancelled_is_noop(self):
        """A cancelled pick leaves photo and mode untouched."""
        self.store.set(PROFILE_PHOTO_URI_KEY, "/private/old.png")
        self._editing("Frank", "frank@example.com")
        self.controller.pick_image()
        self.picker.resolve(None)

        state = self.controller.state
        self.assertEqual(state.photo_ref, "/private/old.png")
        self.assertEqual(state.mode, FormMode.EDITING)
        self.assertFalse(state.pick_in_flight)
        self.assertEqual(self.image_store.copies, [])

    def test_copy_failure_keeps_photo_and_reports(self):
        """A failed copy keeps the old photo and reports on the error hook."""
        self.store.set(PROFILE_PHOTO_URI_KEY, "/private/old.png")
        self.controller.load()
        self.controller.pick_image()
        self.picker.resolve("/home/user/broken.png")
        self.image_store.resolve(None)

        self.assertEqual(self.controller.state.photo_ref, "/private/old.png")
        self.assertEqual(self.store.get(PROFILE_PHOTO_URI_KEY), "/private/old.png")
        self.assertEqual(self.photo_errors, [PHOTO_COPY_FAILED_MESSAGE])
        self.assertFalse(self.controller.state.pick_in_flight)
        self.assertEqual(self.messages, [])

    def test_new_photo_discards_previous(self):
        """Replacing a photo discards the previous private copy."""
        self.store.set(PROFILE_PHOTO_URI_KEY, "/private/old.png")
        self.controller.load()
        self.controller.pick_image()
        self.picker.resolve("/home/user/new.png")
        self.image_store.resolve("/private/new.png")
        self.assertEqual(self.image_store.discarded, ["/private/old.png"])

    def test_overlapping_pick_is_ignored(self):
        """A second pick while one is outstanding is rejected."""
        self.controller.load()
        self.controller.pick_image()
        success, _ = self.controller.pick_image()
        self.assertFalse(success)
        self.assertEqual(len(self.picker.requests), 1)

        self.picker.resolve("/home/user/a.png")
        success, _ = self.controller.pick_image()
        self.assertFalse(success)

        self.image_store.resolve("/private/a.png")
        success, _ = self.controller.pick_image()
        self.assertTrue(success)
        self.assertEqual(len(self.picker.requests), 2)

    def test_picker_exception_clears_in_flight(self):
        """A picker that raises does not leave the pick locked."""
        class BrokenPicker:
            def request(self, mime_filter, callback):
                raise RuntimeError("no dialog")

        self.controller.image_picker = BrokenPicker()
        self.controller.load()
        with self.assertRaises(RuntimeError):
            self.controller.pick_image()
        self.assertFalse(self.controller.state.pick_in_flight)

    def test_copy_start_failure_releases_pick(self):
        """An image store that raises after a deferred pick does not lock picking."""
        class RaisingImageStore(FakeImageStore):
            def copy_to_private_storage(self, handle, callback):
                raise RuntimeError("worker could not start")

        self.store.set(PROFILE_PHOTO_URI_KEY, "/private/old.png")
        self.controller.image_store = RaisingImageStore()
        self.controller.load()
        self.controller.pick_image()
        self.assertTrue(self.controller.state.pick_in_flight)

        self.picker.resolve("/tmp/x.png")
        self.assertFalse(self.controller.state.pick_in_flight)
        self.assertEqual(self.controller.state.photo_ref, "/private/old.png")
        self.assertEqual(self.photo_errors, [PHOTO_COPY_FAILED_MESSAGE])

        success, _ = self.controller.pick_image()
        self.assertTrue(success)

    def test_tap_photo_dispatches_on_mode(self):
        """Tapping the photo previews in VIEWING and picks in EDITING."""
        self.controller.load()
        self.controller.tap_photo()
        self.assertTrue(self.controller.state.preview_visible)
        self.assertEqual(self.picker.requests, [])

        self.controller.dismiss_preview()
        self.assertFalse(self.controller.state.preview_visible)

        self.controller.toggle_or_save()
        self.controller.tap_photo()
        self.assertEqual(self.picker.requests, [IMAGE_MIME_FILTER])
        self.assertFalse(self.controller.state.preview_visible)

    def test_preview_does_not_persist(self):
        """Preview toggles never touch the store."""
        self.controller.load()
        self.controller.request_preview()
        self.controller.dismiss_preview()
        self.assertEqual(storage.list_keys(), [])

    def test_open_my_orders_navigates(self):
        """My Orders menu entry navigates to its route."""
        success, _ = self.controller.open_my_orders()
        self.assertTrue(success)
        self.assertEqual(self.routes, [MY_ORDERS_ROUTE])

    def test_open_my_orders_without_navigator(self):
        """Navigation is refused when no navigator is wired."""
        self.controller.navigate = None
        success, _ = self.controller.open_my_orders()
        self.assertFalse(success)

    def test_every_mutation_rerenders(self):
        """The renderer is notified on each state change."""
        self.controller.load()
        before = self.renders
        self.controller.toggle_or_save()
        self.controller.set_name("G")
        self.controller.set_email("g@example.com")
        self.assertEqual(self.renders, before + 3)
