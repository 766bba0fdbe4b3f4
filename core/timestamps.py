'''시각 렌더링 유틸리티(KR). Timestamp rendering utilities (EN).'''

from __future__ import annotations

from datetime import datetime, timezone

HUMAN_FORMAT = '%Y-%m-%d %H:%M:%S'


def scan_timestamp() -> str:
    '''현재 로컬 시각을 ISO8601로 반환 · Return local now as ISO8601.'''

    return datetime.now().astimezone().isoformat(timespec='seconds')


def utc_now() -> str:
    '''UTC 현재 시각 · Return UTC now as ISO8601.'''

    return datetime.now(tz=timezone.utc).isoformat(timespec='seconds')


def render_mtime(mtime: float) -> tuple[str, str]:
    '''수정 시각의 두 표현 · Return (sortable ISO8601, human readable) pair.'''

    moment = datetime.fromtimestamp(mtime).astimezone()
    return moment.isoformat(timespec='seconds'), moment.strftime(HUMAN_FORMAT)


__all__ = ['HUMAN_FORMAT', 'render_mtime', 'scan_timestamp', 'utc_now']
