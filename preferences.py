# preferences.py
# 계산 기록과 테마 설정을 JSON 파일에 보관한다.
# 저장/읽기 실패는 로그만 남기고 계산기 동작에는 영향을 주지 않는다.

import json
import logging
from pathlib import Path
from typing import List

from calculator import HISTORY_LIMIT

logger = logging.getLogger('calculator')

DEFAULT_PATH = Path.home() / '.keypad_calculator.json'
THEMES = ('light', 'dark')


class PreferenceStore:
    def __init__(self, path: Path = DEFAULT_PATH, history_limit: int = HISTORY_LIMIT) -> None:
        self.path = Path(path)
        self.history_limit = history_limit

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning('설정 파일을 읽지 못했습니다(%s): %s', self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning('설정 파일 형식이 올바르지 않습니다: %s', self.path)
            return {}
        return data

    def _write(self, key: str, value) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.warning('설정을 저장하지 못했습니다(%s): %s', self.path, e)

    def load_history(self) -> List[str]:
        entries = self._read().get('history', [])
        if not isinstance(entries, list):
            return []
        entries = [e for e in entries if isinstance(e, str)]
        return entries[-self.history_limit:]

    def save_history(self, history: List[str]) -> None:
        self._write('history', list(history)[-self.history_limit:])

    def load_theme(self) -> str:
        theme = self._read().get('theme', 'light')
        return theme if theme in THEMES else 'light'

    def save_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f'unknown theme: {theme}')
        self._write('theme', theme)
