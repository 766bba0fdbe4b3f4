'''CodeEcho CLI 진입점(KR). CodeEcho CLI entrypoint (EN).'''

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Sequence

import click

from codeecho import __version__
from core import (
    DEFAULT_INCLUDED_EXTENSIONS,
    EchoConfig,
    OUTPUT_FORMATS,
    configure_logging,
    utc_now,
)
from scan import run_scan_to_file, stream_to
from src.scanner import RootNotFoundError, SinkWriteError


def _split_csv(values: Sequence[str]) -> tuple[str, ...]:
    '''쉼표 목록 펼치기 · Flatten repeated/comma separated option values.'''

    items: list[str] = []
    for value in values:
        items.extend(part.strip() for part in value.split(',') if part.strip())
    return tuple(items)


def _included_extensions(
    config: EchoConfig, include_exts: Sequence[str], all_files: bool
) -> tuple[str, ...] | None:
    '''확장자 허용 목록 결정 · Flags win, then the config file, then the default list.'''

    if include_exts:
        return _split_csv(include_exts)
    if all_files:
        return ()
    if config.scan.included_extensions:
        return None
    return DEFAULT_INCLUDED_EXTENSIONS


@click.group()
@click.version_option(__version__, prog_name='codeecho')
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · YAML config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context, config_file: Path | None, verbose: bool, quiet: bool, log_file: Path | None
) -> None:
    '''저장소를 AI 입력용 문서로 변환 · Make your repository AI-ready.'''

    try:
        config = EchoConfig.from_file(config_file) if config_file else EchoConfig()
    except ValueError as exc:
        raise click.ClickException(f'invalid config: {exc}') from exc
    level = config.log_level
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file or config.log_file, level=level)
    ctx.obj = {'config': config}


@cli.command()
@click.argument('path', type=click.Path(path_type=Path), default=Path('.'))
@click.option(
    '--format',
    '-f',
    'format_name',
    type=click.Choice([*OUTPUT_FORMATS, 'md'], case_sensitive=False),
    default=None,
    help='출력 형식 · Output format',
)
@click.option(
    '--output',
    '-o',
    type=click.Path(path_type=Path),
    default=None,
    help='출력 파일, 생략 시 표준출력 · Output file (stdout when omitted)',
)
@click.option('--no-content', is_flag=True, help='구조만 출력 · Exclude file contents (structure only)')
@click.option('--remove-comments', is_flag=True, help='주석 제거 · Strip comments')
@click.option(
    '--remove-empty-lines', is_flag=True, help='빈 줄 제거 · Remove empty lines'
)
@click.option('--compress-code', is_flag=True, help='공백 압축 · Compress whitespace')
@click.option('--no-tree', is_flag=True, help='디렉터리 트리 생략 · Skip the directory tree')
@click.option('--no-summary', is_flag=True, help='요약 섹션 생략 · Skip the summary section')
@click.option('--line-numbers', is_flag=True, help='줄 번호 · Show line numbers')
@click.option(
    '--exclude-dirs', multiple=True, help='제외 디렉터리(쉼표 구분) · Directories to exclude'
)
@click.option(
    '--include-exts', multiple=True, help='포함 확장자(쉼표 구분) · File extensions to include'
)
@click.option(
    '--all-files',
    is_flag=True,
    help='확장자 기본 목록 해제 · Ignore the default extension allow-list',
)
@click.pass_context
def scan(
    ctx: click.Context,
    path: Path,
    format_name: str | None,
    output: Path | None,
    no_content: bool,
    remove_comments: bool,
    remove_empty_lines: bool,
    compress_code: bool,
    no_tree: bool,
    no_summary: bool,
    line_numbers: bool,
    exclude_dirs: Sequence[str],
    include_exts: Sequence[str],
    all_files: bool,
) -> None:
    '''저장소를 스캔해 문서를 스트리밍 · Scan a repository and stream the document.'''

    config: EchoConfig = ctx.obj['config']
    if not path.exists():
        raise click.ClickException(f'path does not exist: {path}')
    fmt = (format_name or config.format).lower()
    scan_config = config.scan.with_overrides(
        include_content=False if no_content else None,
        remove_comments=remove_comments or None,
        remove_empty_lines=remove_empty_lines or None,
        compress_whitespace=compress_code or None,
        include_directory_tree=False if no_tree else None,
        include_summary=False if no_summary else None,
        show_line_numbers=line_numbers or None,
        excluded_directory_names=_split_csv(exclude_dirs) or None,
        included_extensions=_included_extensions(config, include_exts, all_files),
    )
    root = path.resolve()
    try:
        if output is None:
            statistics, errors = stream_to(root, sys.stdout, fmt, scan_config)
        else:
            statistics, errors = run_scan_to_file(root, output, fmt, scan_config)
    except RootNotFoundError as exc:
        raise click.ClickException(str(exc)) from exc
    except SinkWriteError as exc:
        raise click.ClickException(f'{exc} ({exc.__cause__})') from exc
    summary = {
        'stage': 'scan',
        'format': fmt,
        'output': str(output) if output else '-',
        'files': statistics.total_files,
        'total_size': statistics.total_size_bytes,
        'text_files': statistics.text_file_count,
        'binary_files': statistics.binary_file_count,
        'languages': dict(sorted(statistics.language_counts.items())),
        'errors': len(errors),
        'timestamp': utc_now(),
    }
    click.echo(json.dumps(summary, ensure_ascii=False), err=True)


def main() -> None:
    '''콘솔 스크립트 진입점 · Console script entrypoint.'''

    cli()


if __name__ == '__main__':
    main()
