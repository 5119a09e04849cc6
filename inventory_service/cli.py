# inventory_service/cli.py

"""
인벤토리 서비스 실행용 명령줄 인터페이스입니다.

    inventory-service --host 127.0.0.1 --port 3000 --cache ./cache
"""

import os

import typer
import uvicorn

from inventory_service.core.config import settings
from inventory_service.core.exceptions import StorageError
from inventory_service.utils.files import PhotoStore

cli = typer.Typer(add_completion=False)


@cli.command()
def main(
    host: str = typer.Option(
        settings.HOST, '--host', '-h',
        help="Адреса сервера",
    ),
    port: int = typer.Option(
        settings.PORT, '--port', '-p',
        help="Порт сервера",
    ),
    cache: str = typer.Option(
        settings.CACHE_DIR, '--cache', '-c',
        help="Шлях до директорії кешованих файлів",
    ),
):
    """
    캐시 디렉토리를 준비한 뒤 uvicorn으로 API 서버를 실행합니다.
    """
    settings.HOST = host
    settings.PORT = port
    settings.CACHE_DIR = os.path.abspath(cache)

    # 서버를 띄우기 전에 캐시 디렉토리를 확인합니다 (없으면 생성, 그 밖의 오류는 종료).
    try:
        PhotoStore(settings.CACHE_DIR).ensure_directory()
    except StorageError as e:
        typer.echo(e.message, err=True)
        raise typer.Exit(code=1)

    uvicorn.run(
        "inventory_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.effective_log_level.lower(),
    )


if __name__ == "__main__":
    cli()
