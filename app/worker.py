# app/worker.py

"""
ARQ 워커 설정 모듈입니다.

실행: arq app.worker.WorkerSettings
"""

import logging

from arq import cron
from arq.connections import RedisSettings

from app.core.config import settings
from app.core import tasks as core_tasks
from app.domains.shared import tasks as shared_tasks

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# ARQ 워커가 실행할 태스크 함수 목록
worker_functions = [
    core_tasks.health_check_database_task,
    shared_tasks.cleanup_orphan_uploads_task,
]


class WorkerSettings:
    redis_settings = RedisSettings(host=settings.REDIS_HOST, port=settings.REDIS_PORT)
    functions = worker_functions
    cron_jobs = [
        # 매일 00:00 DB 헬스 체크
        cron(core_tasks.health_check_database_task, name="daily_db_health_check",
             hour=0, minute=0, timeout=300, keep_result=600),
        # 매일 01:00 참조되지 않는 업로드 파일 정리
        cron(shared_tasks.cleanup_orphan_uploads_task, name="daily_orphan_upload_cleanup",
             hour=1, minute=0, timeout=1800, keep_result=3600),
    ]
