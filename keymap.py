# keymap.py
# Python 3.x
# 키보드 키 이름 -> 계산기 토큰 변환 (Qt 비의존)

KEY_EQUIVALENCES = {
    'Escape': 'C',
    'Backspace': 'Backspace',
    'Delete': 'C',
    'Clear': 'C',
    '*': 'x',
    '/': '/',
    '-': '-',
    '+': '+',
    '=': '=',
    'Enter': '=',
}


def to_token(key: str) -> str:
    # 매핑에 없는 키는 그대로 넘기고 엔진이 걸러낸다
    return KEY_EQUIVALENCES.get(key, key)
