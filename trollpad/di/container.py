from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from trollpad.domain.interfaces import IAppConfig, IFileService, ISettingsService
from trollpad.services.config.app_config import build_app_config
from trollpad.services.file_service import FileService
from trollpad.services.font_preferences import FontPreferenceService
from trollpad.services.settings_service import SettingsService
from trollpad.services.ui.adapters import (
    QtFileDialogService,
    QtMessageService,
    QtRetypeDialogService,
)
from trollpad.services.ui.adapters.qt_fonts import installed_families, system_fixed_family
from trollpad.services.ui.main_window import MainWindow
from trollpad.services.ui.ports.dialogs import IFileDialogService, IRetypeDialogService
from trollpad.services.ui.ports.messages import IMessageService
from trollpad.services.ui.presenters.main_presenter import MainPresenter
from trollpad.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services and Qt-backed UI ports if not provided
      - Builds a MainWindow with its MainPresenter attached
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        retype: IRetypeDialogService | None = None,
        fonts: FontPreferenceService | None = None,
        config: IAppConfig | None = None,
    ) -> None:
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.fonts = fonts or FontPreferenceService(
            self.settings_service,
            available_families=installed_families,
            system_family=system_fixed_family,
        )
        self.config = config

        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.retype: IRetypeDialogService = retype or QtRetypeDialogService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IAppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config or build_app_config())

    # ---------- UI factories ----------

    def build_main_presenter(self, view: MainWindow) -> MainPresenter:
        return MainPresenter(
            view=view,
            files=self.file_service,
            messages=self.messages,
            dialogs=self.dialogs,
            retype=self.retype,
            fonts=self.fonts,
            config=self.config,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow, attach its presenter and load the start file if any."""
        window = MainWindow(app_title=app_title)
        presenter = self.build_main_presenter(view=window)
        window.attach_presenter(presenter)
        presenter.start(start_path)
        window.refresh_status_line()
        return window
