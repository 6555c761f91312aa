"""
고성능 JSON 유틸리티

orjson으로 리포트를 직렬화합니다. 콘솔 출력에 맞춰 dumps는 str(UTF-8)로 반환합니다.
"""

from __future__ import annotations

from typing import Any

import orjson


def json_dumps(obj: Any, pretty: bool = False) -> str:
    # 계정 ID는 문자열 키지만, 정렬된 출력을 위해 OPT_SORT_KEYS 사용
    option = orjson.OPT_NON_STR_KEYS | orjson.OPT_SORT_KEYS
    if pretty:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=option).decode("utf-8")
