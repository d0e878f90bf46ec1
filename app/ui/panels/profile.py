"""Profile panel: photo, name/email form and account menu."""
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from app.controllers.profile_controller import ProfileFormController
from app.services.image_picker import DialogImagePicker
from app.ui.dialogs.image_preview import ImagePreviewDialog
from app.ui.panel_header import PanelHeader
from app.ui.theme import Colors, Styles
from app.ui.widget_utils import (
    ClickableLabel,
    circular_pixmap,
    disable_button_focus_rect,
    disable_widget_interaction,
    load_photo_pixmap,
)
from app.workers.image_workers import ThreadedImageStore
from core.notifier import toast
from core.storage import KeyValueStore
from core.validation import EMAIL_ERROR_MESSAGE, NAME_ERROR_MESSAGE

_UNSET = object()


class ProfilePanel(QWidget):
    PHOTO_SIZE = 150
    EDIT_ICON_SIZE = 40

    def __init__(self, nav, store=None, image_picker=None, image_store=None, notify=toast):
        super().__init__()
        self.nav = nav
        self.preview_dialog = None
        self._rendered_photo_ref = _UNSET

        self.controller = ProfileFormController(
            store or KeyValueStore(),
            image_picker or DialogImagePicker(self),
            image_store or ThreadedImageStore(),
            navigate=nav.navigate if nav is not None else None,
            on_change=self.render,
            notify=notify,
        )

        header = PanelHeader("Profile")

        # ---- photo with edit badge ----
        box_size = self.PHOTO_SIZE + self.EDIT_ICON_SIZE // 2
        photo_box = QWidget()
        photo_box.setFixedSize(box_size, box_size)

        self.photo_label = ClickableLabel(self.controller.tap_photo, photo_box)
        self.photo_label.setFixedSize(self.PHOTO_SIZE, self.PHOTO_SIZE)
        self.photo_label.move(0, self.EDIT_ICON_SIZE // 2)
        self.photo_label.setToolTip("Profile Image")

        self.edit_icon_btn = QPushButton("✎", photo_box)
        self.edit_icon_btn.setFixedSize(self.EDIT_ICON_SIZE, self.EDIT_ICON_SIZE)
        self.edit_icon_btn.move(self.PHOTO_SIZE - self.EDIT_ICON_SIZE // 2, 0)
        self.edit_icon_btn.setToolTip("Edit Profile Picture")
        self.edit_icon_btn.setStyleSheet(Styles.edit_icon_button())
        disable_button_focus_rect(self.edit_icon_btn)
        self.edit_icon_btn.clicked.connect(self.controller.pick_image)

        # ---- edit mode fields ----
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Name")
        self.name_input.textEdited.connect(self.controller.set_name)
        self.name_error_label = self._error_label(NAME_ERROR_MESSAGE)

        self.email_input = QLineEdit()
        self.email_input.setPlaceholderText("Email")
        self.email_input.textEdited.connect(self.controller.set_email)
        self.email_error_label = self._error_label(EMAIL_ERROR_MESSAGE)

        # ---- view mode labels ----
        self.name_label = QLabel()
        self.name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        disable_widget_interaction(self.name_label)
        self.name_label.setStyleSheet(Styles.title_label())

        self.email_label = QLabel()
        self.email_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        disable_widget_interaction(self.email_label)
        self.email_label.setStyleSheet(Styles.info_label(Colors.FG_GRAY))

        self.primary_btn = QPushButton("Edit Profile")
        self.primary_btn.setStyleSheet(Styles.primary_button())
        disable_button_focus_rect(self.primary_btn)
        self.primary_btn.clicked.connect(self.controller.toggle_or_save)

        # ---- menu card ----
        card = QFrame()
        card.setObjectName("menu_card")
        card.setStyleSheet(Styles.card())
        card_layout = QVBoxLayout()
        card_layout.setContentsMargins(16, 16, 16, 16)
        self.my_orders_btn = self._menu_button("My Orders", self.controller.open_my_orders)
        self.settings_btn = self._menu_button("Settings")
        self.help_btn = self._menu_button("Help & Support")
        for button in [self.my_orders_btn, self.settings_btn, self.help_btn]:
            card_layout.addWidget(button)
        card.setLayout(card_layout)

        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(header)
        layout.addWidget(photo_box, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addSpacing(16)
        layout.addWidget(self.name_input)
        layout.addWidget(self.name_error_label)
        layout.addSpacing(8)
        layout.addWidget(self.email_input)
        layout.addWidget(self.email_error_label)
        layout.addWidget(self.name_label)
        layout.addSpacing(8)
        layout.addWidget(self.email_label)
        layout.addSpacing(16)
        layout.addWidget(self.primary_btn)
        layout.addSpacing(32)
        layout.addWidget(card)
        layout.addStretch()
        self.setLayout(layout)
        self.setStyleSheet(Styles.window())

        self.controller.load()

    def _error_label(self, text):
        label = QLabel(text)
        disable_widget_interaction(label)
        label.setStyleSheet(Styles.info_label(Colors.ERROR, 12))
        label.hide()
        return label

    def _menu_button(self, title, on_click=None):
        button = QPushButton(title)
        button.setStyleSheet(Styles.menu_button())
        disable_button_focus_rect(button)
        if on_click:
            button.clicked.connect(on_click)
        return button

    def render(self, state):
        """Redraw every widget from the controller state."""
        if state.photo_ref != self._rendered_photo_ref:
            self._rendered_photo_ref = state.photo_ref
            pixmap = load_photo_pixmap(state.photo_ref)
            self.photo_label.setPixmap(circular_pixmap(pixmap, self.PHOTO_SIZE))

        editing = state.is_editing
        self.edit_icon_btn.setVisible(editing)
        self.edit_icon_btn.setEnabled(not state.pick_in_flight)

        if self.name_input.text() != state.name:
            self.name_input.setText(state.name)
        if self.email_input.text() != state.email:
            self.email_input.setText(state.email)
        self.name_input.setStyleSheet(Styles.line_edit(state.name_error))
        self.email_input.setStyleSheet(Styles.line_edit(state.email_error))

        for widget in [self.name_input, self.email_input]:
            widget.setVisible(editing)
        self.name_error_label.setVisible(editing and state.name_error)
        self.email_error_label.setVisible(editing and state.email_error)

        self.name_label.setText(state.name)
        self.email_label.setText(state.email)
        self.name_label.setVisible(not editing)
        self.email_label.setVisible(not editing)

        self.primary_btn.setText("Save Profile" if editing else "Edit Profile")

        self._render_preview(state)

    def _render_preview(self, state):
        if state.preview_visible and self.preview_dialog is None:
            self.preview_dialog = ImagePreviewDialog(state.photo_ref, self)
            self.preview_dialog.finished.connect(self._on_preview_finished)
            self.preview_dialog.open()
        elif not state.preview_visible and self.preview_dialog is not None:
            dialog, self.preview_dialog = self.preview_dialog, None
            dialog.close()

    def _on_preview_finished(self, _result):
        if self.preview_dialog is None:
            return
        self.preview_dialog = None
        self.controller.dismiss_preview()

    def refresh(self):
        self.controller.load()

    def shutdown(self):
        """Finish outstanding photo copies so their results are persisted."""
        wait_all = getattr(self.controller.image_store, "wait_all", None)
        if wait_all is None:
            return
        wait_all()
        QApplication.processEvents()
