"""Reusable control widgets for the property sidebar."""

from PyQt5.QtWidgets import QWidget, QGridLayout, QLabel, QSlider, QLineEdit
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QIntValidator

SLIDER_STYLE = """
    QSlider::groove:horizontal {
        height: 6px;
        border-radius: 3px;
        background-color: rgba(0, 0, 0, 30);
    }
    QSlider::handle:horizontal {
        width: 12px;
        margin: -4px 0;
        border-radius: 6px;
        background-color: #3b82f6;
    }
"""


class NumberSliderWidget(QWidget):
    """Labelled integer slider with an editable value box.

    The label row reads "<label>  [value] <suffix>", the slider sits underneath.
    Only user edits emit valueChanged; setValue is silent so state syncing
    never writes back.
    """

    valueChanged = pyqtSignal(int)

    def __init__(self, label, value=0, min_val=0, max_val=100, suffix="", parent=None):
        super().__init__(parent)
        self.min_val = int(min_val)
        self.max_val = int(max_val)

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setVerticalSpacing(2)

        self.label = QLabel(label)
        self.label.setStyleSheet("font-size: 11px;")
        grid.addWidget(self.label, 0, 0)

        self.value_input = QLineEdit()
        self.value_input.setFixedWidth(44)
        self.value_input.setAlignment(Qt.AlignRight)
        self.value_input.setValidator(QIntValidator(self.min_val, self.max_val, self))
        grid.addWidget(self.value_input, 0, 1)
        grid.addWidget(QLabel(suffix), 0, 2)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(self.min_val, self.max_val)
        self.slider.setStyleSheet(SLIDER_STYLE)
        grid.addWidget(self.slider, 1, 0, 1, 3)
        grid.setColumnStretch(0, 1)

        self.setValue(value)
        self.slider.valueChanged.connect(self._slider_moved)
        self.value_input.textEdited.connect(self._text_edited)

    def _slider_moved(self, value):
        self.value_input.setText(str(value))
        self.valueChanged.emit(value)

    def _text_edited(self, text):
        # Partial input ("", "-", "1" of "150") waits for a full number in range
        if not text.lstrip('-').isdigit():
            return
        value = int(text)
        if not self.min_val <= value <= self.max_val:
            return
        self.slider.blockSignals(True)
        self.slider.setValue(value)
        self.slider.blockSignals(False)
        self.valueChanged.emit(value)

    def value(self):
        return self.slider.value()

    def setValue(self, value):
        """Set value programmatically (clamped to the range, no signal)."""
        self.slider.blockSignals(True)
        self.slider.setValue(int(round(value)))
        self.slider.blockSignals(False)
        self.value_input.setText(str(self.slider.value()))
