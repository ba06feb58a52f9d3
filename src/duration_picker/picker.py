"""Виджеты ввода длительности (Tkinter): панель с цифровой клавиатурой и диалог.

Вся логика ввода живёт в `DurationInputController`; виджеты только передают
нажатия и показывают результат.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .controller import DurationInputController, DurationListener, DurationSnapshot


LOGGER = logging.getLogger(__name__)

# Раскладка цифровой клавиатуры: 4 ряда по 3 кнопки
NUM_PAD_LAYOUT = (
    ("1", "2", "3"),
    ("4", "5", "6"),
    ("7", "8", "9"),
    (None, "0", "00"),
)


class TimeDurationPicker(ttk.Frame):
    """Панель ввода часов/минут/секунд, как в таймере Android."""

    def __init__(
        self,
        parent: tk.Misc,
        *,
        on_duration_change: Optional[DurationListener] = None,
    ) -> None:
        super().__init__(parent, style="Picker.TFrame")
        self.controller = DurationInputController(on_duration_change, source=self)

        self.hours_var = tk.StringVar()
        self.minutes_var = tk.StringVar()
        self.seconds_var = tk.StringVar()

        self._build_display()
        ttk.Separator(self, orient=tk.HORIZONTAL).pack(fill=tk.X, pady=(4, 4))
        self._build_num_pad()
        self._bind_keys()

        self._show(self.controller.snapshot())

    # ------------------------- Построение UI -------------------------
    def _build_display(self) -> None:
        """Верхняя строка: ЧЧ h ММ m СС s и кнопки «⌫» / «C»."""

        row = ttk.Frame(self, style="Picker.Display.TFrame", padding=(8, 6))
        row.pack(fill=tk.X)

        duration = ttk.Frame(row, style="Picker.Display.TFrame")
        duration.pack(side=tk.LEFT, expand=True)
        for column, (variable, unit) in enumerate(
            ((self.hours_var, "h"), (self.minutes_var, "m"), (self.seconds_var, "s"))
        ):
            value = ttk.Label(duration, textvariable=variable, style="Picker.Value.TLabel")
            value.grid(row=0, column=column * 2, padx=(12 if column else 0, 0), sticky=tk.S)
            label = ttk.Label(duration, text=unit, style="Picker.Unit.TLabel")
            label.grid(row=0, column=column * 2 + 1, padx=(2, 0), pady=(0, 6), sticky=tk.S)

        self.clear_button = ttk.Button(row, text="C", width=3, command=self.clear, takefocus=False)
        self.clear_button.pack(side=tk.RIGHT)
        self.backspace_button = ttk.Button(row, text="⌫", width=3, command=self.backspace, takefocus=False)
        self.backspace_button.pack(side=tk.RIGHT, padx=(0, 4))

    def _build_num_pad(self) -> None:
        """Сетка кнопок 1-9, 0 и 00."""

        pad = ttk.Frame(self, style="Picker.TFrame")
        pad.pack(fill=tk.BOTH, expand=True)
        self.num_pad_buttons: list[ttk.Button] = []
        for r, row in enumerate(NUM_PAD_LAYOUT):
            pad.rowconfigure(r, weight=1)
            for c, digits in enumerate(row):
                pad.columnconfigure(c, weight=1)
                if digits is None:
                    continue
                button = ttk.Button(
                    pad,
                    text=digits,
                    style="Picker.NumPad.TButton",
                    command=lambda d=digits: self.push(d),
                    takefocus=False,
                )
                button.grid(row=r, column=c, sticky=tk.NSEW, padx=2, pady=2)
                self.num_pad_buttons.append(button)

    def _bind_keys(self) -> None:
        """Клавиатура: цифры, Backspace, Delete/Escape для очистки.

        Привязки вешаем на окно верхнего уровня: у диалога своё окно, поэтому
        нажатия не попадают в панель главного окна.
        """

        window = self.winfo_toplevel()
        for digit in "0123456789":
            window.bind(f"<KeyPress-{digit}>", self._on_digit_key, add="+")
            window.bind(f"<KeyPress-KP_{digit}>", self._on_digit_key, add="+")
        window.bind("<BackSpace>", lambda _e: self.backspace(), add="+")
        window.bind("<Delete>", lambda _e: self.clear(), add="+")
        window.bind("<Escape>", lambda _e: self.clear(), add="+")

    def _on_digit_key(self, event: tk.Event) -> None:  # type: ignore[override]
        # На цифровом блоке keysym = "KP_7", char может быть пустым
        digit = event.char if event.char.isdigit() else event.keysym[-1]
        self.push(digit)

    # ------------------------- Команды -------------------------
    def push(self, digits: str) -> None:
        self._show(self.controller.push(digits))

    def backspace(self) -> None:
        self._show(self.controller.backspace())

    def clear(self) -> None:
        self._show(self.controller.clear())

    def _show(self, snapshot: DurationSnapshot) -> None:
        self.hours_var.set(snapshot.hours)
        self.minutes_var.set(snapshot.minutes)
        self.seconds_var.set(snapshot.seconds)

    # ------------------------- Публичный интерфейс -------------------------
    def get_duration(self) -> int:
        """Введённая длительность в миллисекундах."""

        return self.controller.duration_millis

    def set_duration(self, millis: int) -> None:
        self._show(self.controller.set_duration(millis))

    def set_on_duration_change_listener(self, listener: Optional[DurationListener]) -> None:
        """Назначить (или снять, передав None) обработчик изменения длительности."""

        self.controller.set_listener(listener)

    def save_state(self) -> str:
        """Строка из 6 цифр для сохранения между запусками."""

        return self.controller.save()

    def restore_state(self, raw: str) -> None:
        self._show(self.controller.restore(raw))


class TimeDurationPickerDialog(tk.Toplevel):
    """Модальный диалог с панелью ввода и кнопками OK/Отмена."""

    def __init__(
        self,
        parent: tk.Misc,
        *,
        initial_duration: int = 0,
        on_duration_set: Optional[Callable[[TimeDurationPicker, int], None]] = None,
        title: str = "Длительность",
    ) -> None:
        super().__init__(parent)
        self.title(title)
        self.transient(parent)
        self.resizable(False, False)
        self.configure(background="#f5f5f5")
        self.on_duration_set = on_duration_set
        self.result: Optional[int] = None

        body = ttk.Frame(self, padding=12)
        body.pack(fill=tk.BOTH, expand=True)

        self.picker = TimeDurationPicker(body)
        self.picker.set_duration(initial_duration)
        self.picker.pack(fill=tk.BOTH, expand=True)

        buttons = ttk.Frame(body)
        buttons.pack(fill=tk.X, pady=(12, 0))
        ttk.Button(buttons, text="Отмена", command=self.destroy).pack(side=tk.RIGHT)
        ttk.Button(buttons, text="OK", command=self._on_ok).pack(side=tk.RIGHT, padx=(0, 6))

        self.protocol("WM_DELETE_WINDOW", self.destroy)
        self.grab_set()

        # Центрируем диалог относительно родителя
        self.update_idletasks()
        x = parent.winfo_rootx() + (parent.winfo_width() // 2) - (self.winfo_width() // 2)
        y = parent.winfo_rooty() + (parent.winfo_height() // 2) - (self.winfo_height() // 2)
        self.geometry(f"+{x}+{y}")

    def _on_ok(self) -> None:
        self.result = self.picker.get_duration()
        LOGGER.debug("Dialog confirmed with %d ms", self.result)
        if callable(self.on_duration_set):
            self.on_duration_set(self.picker, self.result)
        self.destroy()


def configure_picker_styles(style: ttk.Style, family: str) -> None:
    """Стили ttk для панели ввода."""

    style.configure("Picker.TFrame", background="#f5f5f5")
    style.configure("Picker.Display.TFrame", background="#e8eaed")
    style.configure("Picker.Value.TLabel", font=(family, 28, "bold"), foreground="#1f1f1f", background="#e8eaed")
    style.configure("Picker.Unit.TLabel", font=(family, 10), foreground="#555555", background="#e8eaed")
    style.configure("Picker.NumPad.TButton", font=(family, 14), padding=(6, 8))
