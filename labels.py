# labels.py
# 기록/표시부에 쓰이는 연산 이름 번역 테이블

import os

DEFAULT_LANGUAGE = 'es'

TRANSLATIONS = {
    'es': {
        'add': 'suma',
        'subtract': 'resta',
        'multiply': 'multiplica',
        'divide': 'divide',
        'exponent': 'potencia',
        'sine': 'seno',
        'cosine': 'coseno',
        'tangent': 'tangente',
        'log10': 'logaritmo',
        'sqrt': 'raíz cuadrada',
        'square': 'cuadrado',
        'factorial': 'factorial',
        'percent': 'porcentaje',
        'error': 'Error',
    },
    'en': {
        'add': 'add',
        'subtract': 'subtract',
        'multiply': 'multiply',
        'divide': 'divide',
        'exponent': 'power',
        'sine': 'sine',
        'cosine': 'cosine',
        'tangent': 'tangent',
        'log10': 'logarithm',
        'sqrt': 'square root',
        'square': 'square',
        'factorial': 'factorial',
        'percent': 'percent',
        'error': 'Error',
    },
}


def detect_language() -> str:
    """LANG 환경 변수(예: 'en_US.UTF-8')에서 언어 코드를 뽑는다."""
    lang = os.environ.get('LANG', '')
    code = lang.split('.')[0].split('_')[0].split('-')[0].lower()
    return code if code in TRANSLATIONS else DEFAULT_LANGUAGE


class Labels:
    """tag -> 표시 이름 조회. 모르는 태그는 그대로 돌려준다."""

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language
        self._table = TRANSLATIONS.get(language, {})

    def __call__(self, tag: str) -> str:
        return self._table.get(tag, tag)
