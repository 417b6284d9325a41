# flake8: noqa
# scripts/hash_admin_password.py

import typer

from app.core.security import get_password_hash

cli = typer.Typer()


@cli.command()
def main(
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="관리자 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="해시로 변환할 관리자 비밀번호입니다. (최소 8자 이상)"
    ),
):
    """
    관리자 비밀번호의 bcrypt 해시를 출력합니다.
    출력값을 .env의 ADMIN_PASSWORD_HASH에 설정하세요.
    """
    if len(password) < 8:
        typer.echo("오류: 비밀번호는 최소 8자 이상이어야 합니다.", err=True)
        raise typer.Abort()

    typer.echo(f"ADMIN_PASSWORD_HASH={get_password_hash(password)}")


if __name__ == "__main__":
    cli()
