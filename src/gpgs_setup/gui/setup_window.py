"""Setup form for the Android configuration GUI."""

from __future__ import annotations

from loguru import logger
from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .. import strings
from ..config import SetupConfig
from ..models import DEFAULT_CLASS_NAME, SetupRequest, SetupResult
from ..settings import (
    ANDROID_CLIENT_ID_KEY,
    CONSTANTS_CLASS_NAME_KEY,
    RESOURCE_DATA_KEY,
    ProjectSettings,
)
from ..toolchain import ProjectToolchain
from ..workflow import perform_setup


def _wrapped_label(text: str, parent: QWidget) -> QLabel:
    label = QLabel(text, parent)
    label.setWordWrap(True)
    return label


class AndroidSetupWindow(QDialog):
    """Collect the class name, resource XML and client id, then run setup."""

    def __init__(self, config: SetupConfig, *, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._config = config
        self._settings = ProjectSettings.open(config.settings_path)
        self.setWindowTitle(strings.TITLE)
        self.setMinimumSize(500, 400)

        layout = QVBoxLayout(self)
        layout.addWidget(_wrapped_label(strings.BLURB, self))

        class_group = QGroupBox(strings.CLASS_NAME_TITLE, self)
        class_layout = QFormLayout(class_group)
        class_layout.addRow(_wrapped_label(strings.CLASS_NAME_BLURB, class_group))
        self._class_name_edit = QLineEdit(class_group)
        class_layout.addRow(strings.CLASS_NAME_TITLE, self._class_name_edit)
        layout.addWidget(class_group)

        resources_group = QGroupBox(strings.RESOURCES_TITLE, self)
        resources_layout = QVBoxLayout(resources_group)
        resources_layout.addWidget(_wrapped_label(strings.RESOURCES_BLURB, resources_group))
        self._resources_edit = QPlainTextEdit(resources_group)
        resources_layout.addWidget(self._resources_edit)
        layout.addWidget(resources_group, stretch=1)

        client_group = QGroupBox(strings.CLIENT_ID_TITLE, self)
        client_layout = QFormLayout(client_group)
        client_layout.addRow(_wrapped_label(strings.CLIENT_ID_BLURB, client_group))
        self._client_id_edit = QLineEdit(client_group)
        client_layout.addRow(strings.CLIENT_ID_LABEL, self._client_id_edit)
        layout.addWidget(client_group)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        self._setup_button = QPushButton(strings.SETUP_BUTTON, self)
        self._cancel_button = QPushButton(strings.CANCEL_BUTTON, self)
        buttons_layout.addWidget(self._setup_button)
        buttons_layout.addWidget(self._cancel_button)
        buttons_layout.addStretch(1)
        layout.addLayout(buttons_layout)

        self._setup_button.clicked.connect(self.do_setup)
        self._cancel_button.clicked.connect(self.reject)

        self._load_from_settings()

    def _load_from_settings(self) -> None:
        self._class_name_edit.setText(
            self._settings.get(CONSTANTS_CLASS_NAME_KEY) or DEFAULT_CLASS_NAME
        )
        self._resources_edit.setPlainText(self._settings.get(RESOURCE_DATA_KEY))
        self._client_id_edit.setText(self._settings.get(ANDROID_CLIENT_ID_KEY))

    def build_request(self) -> SetupRequest:
        return SetupRequest(
            client_id=self._client_id_edit.text().strip(),
            class_name=self._class_name_edit.text().strip(),
            resource_xml=self._resources_edit.toPlainText(),
        )

    def do_setup(self) -> None:
        request = self.build_request()
        toolchain = ProjectToolchain(self._config, self._settings)
        try:
            result = perform_setup(request, self._settings, toolchain, self._config)
        except ValueError as exc:
            logger.exception("Setup failed")
            QMessageBox.critical(self, strings.ERROR_TITLE, str(exc))
            return
        self._show_result(result)

    def _show_result(self, result: SetupResult) -> None:
        title = strings.title_for(result.outcome)
        if result.ok:
            QMessageBox.information(self, title, result.message)
            self.accept()
        else:
            QMessageBox.critical(self, title, result.message)


__all__ = ["AndroidSetupWindow"]
