#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# calculator_window.py
# Python 3.x, PyQt5

import sys
import argparse
import logging

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
    QLabel,
)

from calculator import Calculator
from keymap import to_token

PRESS_FEEDBACK_MS = 100  # 키보드 입력 시 버튼 눌림 표시 시간(ms)
DISPLAY_FONT_SIZE = 28
SUB_DISPLAY_FONT_SIZE = 14

BUTTONS = [
    ['C', '+/-', '%', '÷'],
    ['7', '8', '9', 'x'],
    ['4', '5', '6', '-'],
    ['1', '2', '3', '+'],
    ['0', '.', '='],
]

# 버튼 라벨과 다른 토큰 -> 강조할 버튼 라벨
BUTTON_ALIASES = {'/': '÷', '*': 'x'}

# Qt 키 코드 -> 키 이름 (나머지는 입력 문자 그대로)
QT_KEY_NAMES = {
    Qt.Key_Escape: 'Escape',
    Qt.Key_Backspace: 'Backspace',
    Qt.Key_Delete: 'Delete',
    Qt.Key_Clear: 'Clear',
    Qt.Key_Return: 'Enter',
    Qt.Key_Enter: 'Enter',
}


def setup_logger(log_path='calculator.log', level=logging.INFO):
    """콘솔과 파일(UTF-8)로 동시에 로그를 남기는 로거를 설정한다."""
    logger = logging.getLogger('calculator')
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    fh.setLevel(level)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    return logger


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼/키보드 -> Calculator 엔진 연결"""

    def __init__(self) -> None:
        super().__init__()
        self.engine = Calculator()
        self.buttons = {}
        self._build_ui()

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        # 대기값 + 연산자 표시
        self.sub_display = QLabel()
        self.sub_display.setAlignment(Qt.AlignRight)
        font = QFont(self.sub_display.font())
        font.setPointSize(SUB_DISPLAY_FONT_SIZE)
        self.sub_display.setFont(font)
        root.addWidget(self.sub_display)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.NoFocus)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(DISPLAY_FONT_SIZE)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            c = 0
            for label in row:
                btn = QPushButton(label)
                btn.setMinimumHeight(56)
                btn.setCursor(Qt.PointingHandCursor)
                # 키보드 포커스는 창이 받도록
                btn.setFocusPolicy(Qt.NoFocus)
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                self.buttons[label] = btn

                span = 2 if label == '0' else 1
                grid.addWidget(btn, r, c, 1, span)
                c += span

        self.setFocusPolicy(Qt.StrongFocus)
        self._refresh()
        self.resize(360, 560)

    def on_button(self, token: str) -> None:
        self.engine.submit(token)
        self._refresh()

    def handle_key(self, key: str) -> None:
        """키 이름을 토큰으로 바꿔 엔진에 넘기고 해당 버튼을 잠시 눌림 표시"""
        token = to_token(key)
        self.on_button(token)
        self._show_pressed(token)

    def keyPressEvent(self, event) -> None:
        key = QT_KEY_NAMES.get(event.key(), event.text())
        if not key:
            super().keyPressEvent(event)
            return
        self.handle_key(key)

    def _show_pressed(self, token: str) -> None:
        target = BUTTON_ALIASES.get(token, token)
        for label, btn in self.buttons.items():
            if label != target:
                btn.setDown(False)
                continue
            btn.setDown(True)
            QTimer.singleShot(PRESS_FEEDBACK_MS, lambda b=btn: b.setDown(False))

    def _refresh(self) -> None:
        self.display.setText(self.engine.display_value())
        op = self.engine.pending_operator()
        if op:
            self.sub_display.setText('{} {}'.format(self.engine.pending_value(), op))
        else:
            self.sub_display.setText('')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='사칙연산 계산기(PyQt5)를 실행합니다.'
    )
    parser.add_argument('--log', default='calculator.log',
                        help='로그 파일 경로(기본값: calculator.log)')
    parser.add_argument('--verbose', action='store_true',
                        help='입력마다 상태를 DEBUG 로그로 남깁니다.')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logger = setup_logger(args.log, logging.DEBUG if args.verbose else logging.INFO)
    logger.info('[시작] 계산기 창을 엽니다.')

    app = QApplication(sys.argv[:1])
    w = CalculatorWindow()
    w.show()
    code = app.exec_()
    logger.info('[종료] 코드=%d', code)
    sys.exit(code)


if __name__ == '__main__':
    main()
