# flake8: noqa
# scripts/seed_database.py

import asyncio

import typer

from app.core.database import create_db_and_tables, engine, get_async_session_context, wait_for_database
from app.core.seed import seed_database_if_needed

cli = typer.Typer()


async def run_seed(create_tables: bool) -> list:
    await wait_for_database()
    if create_tables:
        await create_db_and_tables()
    try:
        async with get_async_session_context() as db:
            return await seed_database_if_needed(db)
    finally:
        await engine.dispose()


@cli.command()
def main(
    create_tables: bool = typer.Option(
        True, '--create-tables/--no-create-tables',
        help="시드 전에 테이블을 생성합니다. (기존 테이블은 유지)"
    ),
):
    """
    비어 있는 테이블에 홈페이지 기본 콘텐츠를 채웁니다. 데이터가 있는 테이블은 건너뜁니다.
    """
    seeded = asyncio.run(run_seed(create_tables))
    if seeded:
        typer.echo(f"시드 완료: {', '.join(seeded)}")
    else:
        typer.echo("모든 테이블에 이미 데이터가 있어 시드를 건너뛰었습니다.")


if __name__ == "__main__":
    cli()
