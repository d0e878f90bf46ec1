"""In-memory app state: navigation stack and the profile form state."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FormMode(str, Enum):
    VIEWING = "VIEWING"
    EDITING = "EDITING"


@dataclass
class ProfileFormState:
    name: str = ""
    email: str = ""
    photo_ref: str | None = None
    mode: FormMode = FormMode.VIEWING
    name_error: bool = False
    email_error: bool = False
    preview_visible: bool = False
    pick_in_flight: bool = False

    @property
    def is_editing(self) -> bool:
        return self.mode == FormMode.EDITING


class AppState:
    """Global UI state: navigation stack."""

    def __init__(self):
        self.nav_stack = ["profile"]

app_state = AppState()
