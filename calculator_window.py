# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import sys
import argparse
import logging
from pathlib import Path

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QHBoxLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
    QListWidget,
)

from calculator import HISTORY_LIMIT, DisplaySnapshot
from keymap import dispatch_action, dispatch_key
from labels import TRANSLATIONS, Labels, detect_language
from preferences import DEFAULT_PATH, THEMES, PreferenceStore
from scientific_calculator import ScientificCalculator

logger = logging.getLogger('calculator')

# (표시 라벨, 동작 이름)
BUTTONS = [
    [('sin', 'sin'), ('cos', 'cos'), ('tan', 'tan'), ('log', 'log'), ('√x', 'sqrt')],
    [('x²', 'power'), ('n!', 'factorial'), ('%', 'percent'), ('xʸ', 'exp'), ('π', 'pi')],
    [('7', '7'), ('8', '8'), ('9', '9'), ('÷', 'divide'), ('⌫', 'backspace')],
    [('4', '4'), ('5', '5'), ('6', '6'), ('×', 'multiply'), ('AC', 'clear')],
    [('1', '1'), ('2', '2'), ('3', '3'), ('−', 'subtract'), ('Ans', 'ans')],
    [('0', '0'), ('.', '.'), ('=', 'calculate'), ('+', 'add')],
]

SPECIAL_KEYS = {
    Qt.Key_Return: 'Enter',
    Qt.Key_Enter: 'Enter',
    Qt.Key_Backspace: 'Backspace',
    Qt.Key_Delete: 'Delete',
    Qt.Key_Escape: 'Escape',
}

STYLESHEETS = {
    'light': '',
    'dark': (
        'QWidget { background-color: #1e1e1e; color: #f0f0f0; }'
        'QPushButton { background-color: #333333; border: 1px solid #444444; }'
        'QLineEdit, QListWidget { background-color: #121212; }'
    ),
}


def setup_logger(log_path='calculator.log', verbose=False):
    """콘솔과 파일(UTF-8)로 동시에 로그를 남기는 로거를 설정한다."""
    logger = logging.getLogger('calculator')
    if logger.handlers:
        return logger

    level = logging.DEBUG if verbose else logging.INFO
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
    """PyQt5 UI: 버튼/키보드 → ScientificCalculator 엔진 연결"""

    def __init__(self, store: PreferenceStore, language: str, theme=None) -> None:
        super().__init__()
        self.store = store
        self.engine = ScientificCalculator(
            labels=Labels(language),
            display_sink=self.on_display,
            history_sink=self.on_history,
            history=store.load_history(),
        )
        self.theme = theme or store.load_theme()
        self._build_ui()
        self.apply_theme(self.theme)
        self.on_display(self.engine.snapshot())

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        top = QHBoxLayout()
        self.theme_button = QPushButton()
        self.theme_button.setCursor(Qt.PointingHandCursor)
        self.theme_button.setFocusPolicy(Qt.NoFocus)
        self.theme_button.clicked.connect(lambda checked=False: self.toggle_theme())
        top.addStretch(1)
        top.addWidget(self.theme_button)
        root.addLayout(top)

        self.history_view = QListWidget()
        self.history_view.setFocusPolicy(Qt.NoFocus)
        self.history_view.setMaximumHeight(120)
        self.history_view.addItems(self.engine.history)
        root.addWidget(self.history_view)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.NoFocus)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(26)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            for c, (label, action) in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(52)
                btn.setCursor(Qt.PointingHandCursor)
                btn.setFocusPolicy(Qt.NoFocus)
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, a=action: self.on_button(a))
                grid.addWidget(btn, r, c)

        self.setFocusPolicy(Qt.StrongFocus)
        self.resize(420, 620)

    # 엔진 → 화면
    def on_display(self, snapshot: DisplaySnapshot) -> None:
        self.display.setText(snapshot.text)

    def on_history(self, entry: str) -> None:
        self.history_view.addItem(entry)
        while self.history_view.count() > HISTORY_LIMIT:
            self.history_view.takeItem(0)
        self.history_view.scrollToBottom()
        self.store.save_history(self.engine.history)

    # 입력 → 엔진
    def on_button(self, action: str) -> None:
        try:
            dispatch_action(self.engine, action)
        except Exception:
            # 처리 중 예외가 나도 계산기는 계속 쓸 수 있게 초기화
            logger.exception('버튼 처리 실패: %s', action)
            self.engine.clear()

    def keyPressEvent(self, event) -> None:
        modifiers = event.modifiers()
        key = SPECIAL_KEYS.get(event.key(), event.text())
        handled = dispatch_key(
            self.engine,
            key,
            ctrl=bool(modifiers & Qt.ControlModifier),
            alt=bool(modifiers & Qt.AltModifier),
            meta=bool(modifiers & Qt.MetaModifier),
            repeat=event.isAutoRepeat(),
        )
        if handled:
            event.accept()
        else:
            super().keyPressEvent(event)

    # 테마
    def apply_theme(self, theme: str) -> None:
        self.theme = theme
        self.setStyleSheet(STYLESHEETS[theme])
        self.theme_button.setText('☀️' if theme == 'dark' else '🌙')

    def toggle_theme(self) -> None:
        self.apply_theme('light' if self.theme == 'dark' else 'dark')
        self.store.save_theme(self.theme)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='공학용 계산기(PyQt5)')
    parser.add_argument('--language', choices=sorted(TRANSLATIONS), default=detect_language(),
                        help='연산 이름 표시 언어(기본값: LANG 환경 변수)')
    parser.add_argument('--theme', choices=THEMES, default=None,
                        help='시작 테마(기본값: 저장된 설정)')
    parser.add_argument('--data-file', type=Path, default=DEFAULT_PATH,
                        help='기록/테마 저장 파일 경로')
    parser.add_argument('--log', default='calculator.log',
                        help='로그 파일 경로(기본값: calculator.log)')
    parser.add_argument('--verbose', action='store_true',
                        help='입력 단위 디버그 로그 출력')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger(args.log, args.verbose)
    logger.info('계산기 시작 (언어=%s)', args.language)

    app = QApplication(sys.argv)
    w = CalculatorWindow(PreferenceStore(args.data_file), args.language, args.theme)
    w.show()
    code = app.exec()
    logger.info('계산기 종료')
    sys.exit(code)


if __name__ == '__main__':
    main()
