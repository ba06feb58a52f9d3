"""Графический интерфейс (Tkinter) для ввода длительности.

Кратко о возможностях:
- панель ввода часов/минут/секунд с цифровой клавиатурой;
- кнопка «Старт» доступна, только когда длительность больше нуля;
- ввод длительности в модальном диалоге (по умолчанию 15 минут);
- настройка «Длительность по умолчанию» с кратким описанием значения;
- журнал выбранных длительностей в книге Excel;
- введённые цифры сохраняются между запусками.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import tkinter as tk
from datetime import datetime
from pathlib import Path
from tkinter import filedialog, font, messagebox, ttk
from typing import Optional


# Импорты одинаково работают и при запуске из исходников, и при запуске из пакета
if __package__ in {None, ""}:  # pragma: no cover - запуск как скрипт
    from duration_picker.config import AppConfig
    from duration_picker.digit_buffer import InvalidInputError
    from duration_picker.duration_codec import format_duration_or, format_hours_minutes_seconds
    from duration_picker.duration_log import DURATION_SHEET, append_duration_entry, create_template
    from duration_picker.picker import TimeDurationPicker, TimeDurationPickerDialog, configure_picker_styles
    from duration_picker.version import VERSION
else:  # стандартный путь импорта пакета
    from .config import AppConfig
    from .digit_buffer import InvalidInputError
    from .duration_codec import format_duration_or, format_hours_minutes_seconds
    from .duration_log import DURATION_SHEET, append_duration_entry, create_template
    from .picker import TimeDurationPicker, TimeDurationPickerDialog, configure_picker_styles
    from .version import VERSION


LOGGER = logging.getLogger(__name__)
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
NO_PREFERENCE = "Не задана"


def setup_logging(level: str, log_file: Optional[Path] = None) -> None:
    """Настроить корневой логгер пакета: файл (если задан) и stderr."""

    logger = logging.getLogger("duration_picker")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def _open_with_os(path: str) -> None:
    """Открыть файл программой по умолчанию."""

    if sys.platform.startswith("win"):
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])


class DurationPickerApp(tk.Tk):
    """Главное окно приложения: меню, панель ввода, кнопки и строка состояния."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        super().__init__()
        # Окно
        self.title("Ввод длительности")
        self.geometry("360x520")
        self.minsize(320, 460)
        self.configure(background="#f5f5f5")

        # Конфиг и состояние
        self.config_manager = config or AppConfig.load()

        self.status_var = tk.StringVar()
        self.preference_var = tk.StringVar()

        self._configure_styles()
        self._build_menu()
        self._build_layout()
        self._restore_input()
        self._refresh_preference()
        self._refresh_status()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # ------------------------- Построение UI -------------------------
    def _configure_styles(self) -> None:
        """Настроить тему и стили виджетов ttk."""

        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass

        family = "Segoe UI" if sys.platform.startswith("win") else "Arial"
        try:
            font.nametofont("TkDefaultFont").configure(family=family, size=9)
        except tk.TclError:
            pass

        style.configure("TFrame", background="#f5f5f5")
        style.configure("App.Label", font=(family, 9), foreground="#1f1f1f", background="#f5f5f5")
        style.configure("App.Status.TLabel", font=(family, 9), foreground="#555555", background="#f5f5f5")
        configure_picker_styles(style, family)

    def _build_menu(self) -> None:
        """Создать меню приложения (Файл/Помощь)."""

        menu_bar = tk.Menu(self)

        file_menu = tk.Menu(menu_bar, tearoff=False)
        file_menu.add_command(label="Выбрать журнал Excel", command=self._prompt_for_log)
        file_menu.add_command(label="Создать журнал...", command=self._create_log)
        file_menu.add_command(label="Открыть журнал", command=self._open_current_log)
        file_menu.add_separator()
        file_menu.add_command(label="Выход", command=self._on_close)
        menu_bar.add_cascade(label="Файл", menu=file_menu)

        help_menu = tk.Menu(menu_bar, tearoff=False)
        help_menu.add_command(label="О приложении", command=self._show_about)
        menu_bar.add_cascade(label="Помощь", menu=help_menu)

        self.config(menu=menu_bar)

    def _build_layout(self) -> None:
        """Построить основную разметку окна."""

        container = ttk.Frame(self, padding=(16, 12))
        container.pack(fill=tk.BOTH, expand=True)

        self.picker = TimeDurationPicker(container, on_duration_change=self._on_duration_changed)
        self.picker.pack(fill=tk.BOTH, expand=True)

        actions = ttk.Frame(container)
        actions.pack(fill=tk.X, pady=(12, 0))
        self.start_button = ttk.Button(actions, text="Старт", command=self.start)
        self.start_button.pack(side=tk.LEFT)
        ttk.Button(actions, text="Диалог...", command=self._open_dialog).pack(side=tk.RIGHT)

        preference = ttk.Frame(container)
        preference.pack(fill=tk.X, pady=(12, 0))
        ttk.Button(preference, text="Длительность по умолчанию...", command=self._edit_preference).pack(side=tk.LEFT)
        ttk.Label(preference, textvariable=self.preference_var, style="App.Label").pack(side=tk.LEFT, padx=(8, 0))

        status_label = ttk.Label(
            container,
            textvariable=self.status_var,
            anchor=tk.W,
            wraplength=320,
            style="App.Status.TLabel",
        )
        status_label.pack(fill=tk.X, side=tk.BOTTOM, pady=(12, 0))

        self._update_start_button(self.picker.get_duration())

    # ------------------------- Состояние -------------------------
    def _restore_input(self) -> None:
        """Восстановить цифры, введённые при прошлом запуске."""

        raw = self.config_manager.duration_input
        try:
            self.picker.restore_state(raw)
        except InvalidInputError:
            LOGGER.warning("Cannot restore saved input %r, starting empty", raw)
            self.picker.clear()

    def _on_close(self) -> None:
        """Сохранить введённые цифры и закрыть окно."""

        self.config_manager.duration_input = self.picker.save_state()
        try:
            self.config_manager.save()
        except OSError:
            LOGGER.exception("Failed to save configuration")
        LOGGER.info("Application closed")
        self.destroy()

    def _on_duration_changed(self, _picker: TimeDurationPicker, duration: int) -> None:
        self._update_start_button(duration)

    def _update_start_button(self, duration: int) -> None:
        # Кнопка может ещё не существовать во время построения панели
        button = getattr(self, "start_button", None)
        if button is not None:
            button.configure(state=tk.NORMAL if duration > 0 else tk.DISABLED)

    def _refresh_status(self) -> None:
        """Обновить строку состояния: путь к журналу (или его отсутствие)."""

        if self.config_manager.log_path:
            self.status_var.set(f"Журнал: {self.config_manager.log_path}")
        else:
            self.status_var.set("Журнал Excel не выбран")

    def _refresh_preference(self) -> None:
        self.preference_var.set(format_duration_or(self.config_manager.preferred_duration, NO_PREFERENCE))

    # ------------------------- Действия -------------------------
    def start(self) -> None:
        """Показать введённую длительность и записать её в журнал."""

        self._announce("Панель", self.picker.get_duration())

    def _open_dialog(self) -> None:
        TimeDurationPickerDialog(
            self,
            initial_duration=self.config_manager.dialog_initial_duration,
            on_duration_set=lambda _picker, duration: self._announce("Диалог", duration),
        )

    def _edit_preference(self) -> None:
        """Изменить длительность по умолчанию в диалоге."""

        def on_set(_picker: TimeDurationPicker, duration: int) -> None:
            self.config_manager.preferred_duration = duration
            try:
                self.config_manager.save()
            except OSError as exc:
                LOGGER.exception("Failed to save preference")
                messagebox.showerror("Ошибка", f"Не удалось сохранить настройку:\n{exc}")
            self._refresh_preference()

        TimeDurationPickerDialog(
            self,
            initial_duration=self.config_manager.preferred_duration,
            on_duration_set=on_set,
            title="Длительность по умолчанию",
        )

    def _announce(self, source: str, duration: int) -> None:
        """Сообщить о выбранной длительности (и записать в журнал, если он выбран)."""

        formatted = format_hours_minutes_seconds(duration)
        LOGGER.info("%s: picked %s (%d ms)", source, formatted, duration)

        if self.config_manager.log_path:
            try:
                append_duration_entry(
                    self.config_manager.log_path,
                    source=source,
                    duration_millis=duration,
                    picked_at=datetime.now(),
                )
            except Exception as exc:  # pylint: disable=broad-except
                LOGGER.exception("Failed to write duration log")
                messagebox.showerror("Ошибка", f"Не удалось записать данные в Excel:\n{exc}")

        messagebox.showinfo("Длительность", formatted)

    # ------------------------- Журнал Excel -------------------------
    def _prompt_for_log(self) -> None:
        """Выбрать книгу Excel для журнала."""

        filename = filedialog.askopenfilename(
            title="Выберите Excel файл",
            filetypes=(("Excel файлы", "*.xlsx"), ("Все файлы", "*.*")),
        )
        if not filename:
            return
        self._use_log(filename)

    def _create_log(self) -> None:
        """Создать новую книгу журнала и сразу выбрать её."""

        save_path = filedialog.asksaveasfilename(
            title="Сохранить как",
            defaultextension=".xlsx",
            filetypes=(("Excel", "*.xlsx"), ("All files", "*.*")),
            initialfile="durations.xlsx",
        )
        if not save_path:
            return
        try:
            create_template(save_path)
        except Exception as exc:  # pylint: disable=broad-except
            LOGGER.exception("Failed to create duration log")
            messagebox.showerror("Ошибка", f"Не удалось создать файл:\n{exc}")
            return
        self._use_log(save_path)

    def _use_log(self, path: str) -> None:
        self.config_manager.log_path = path
        try:
            self.config_manager.save()
        except OSError as exc:
            LOGGER.exception("Failed to save configuration")
            messagebox.showerror("Ошибка", f"Не удалось сохранить настройки:\n{exc}")
        self._refresh_status()

    def _open_current_log(self) -> None:
        """Открыть текущий журнал средствами ОС."""

        path = self.config_manager.log_path
        if not path:
            messagebox.showinfo("Текущий файл", "Журнал Excel не выбран")
            return
        if not Path(path).exists():
            messagebox.showwarning("Нет файла", "Указанный файл не существует. Выберите журнал заново.")
            return
        try:
            _open_with_os(path)
        except Exception as exc:  # pylint: disable=broad-except
            LOGGER.exception("Failed to open %s", path)
            messagebox.showerror("Ошибка", f"Не удалось открыть файл:\n{exc}")

    def _show_about(self) -> None:
        """Показать информацию о версии приложения."""

        messagebox.showinfo(
            "О приложении",
            f"Duration Picker\nВерсия: {VERSION}\n\nЖурнал пишется на лист '{DURATION_SHEET}'.",
        )


def main() -> None:
    """Точка входа: создать и запустить приложение."""

    config = AppConfig.load()
    setup_logging(config.log_level, config.log_file)
    LOGGER.info("Starting Duration Picker %s", VERSION)
    app = DurationPickerApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
