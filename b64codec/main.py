"""b64codec - command line front end for the Base64 codec.

Usage:
    b64codec encode [INPUT] [-o FILE] [--data-uri MIME]   # Encode bytes
    b64codec decode [INPUT] [-o FILE] [--strict] [--raw]  # Decode text
    b64codec size N [--decoded]                           # Buffer capacities

INPUT defaults to '-' (stdin).

Examples:
    b64codec encode logo.png -o logo.b64
    b64codec encode logo.png --data-uri image/png
    echo "SGVsbG8=" | b64codec decode
    b64codec decode payload.b64 --strict --raw -o payload.bin
"""

import sys

import click

from .config import ConfigError, load_config
from .core import (
    CodecError,
    DecodePolicy,
    build_data_uri,
    decode,
    encode,
    encoded_length,
    parse_data_uri,
    required_decoded_capacity,
    required_encoded_capacity,
)


def _read_input(path: str) -> bytes:
    if path == '-':
        return sys.stdin.buffer.read()
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e.strerror}")


def _write_output(path: str, data, mode: str = 'w'):
    try:
        with open(path, mode) as f:
            f.write(data)
    except OSError as e:
        raise click.ClickException(f"Cannot write {path}: {e.strerror}")


def _verbose(ctx, message: str):
    if ctx.obj['verbose']:
        click.echo(message, err=True)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--dry-run', '-n', is_flag=True, help='Show what would be done')
@click.option('--config', '-c', 'config_path', type=click.Path(dir_okay=False),
              help='YAML file with defaults (or set $B64CODEC_CONFIG)')
@click.pass_context
def cli(ctx, verbose, dry_run, config_path):
    """b64codec - standard Base64 encoding and decoding."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.UsageError(str(e))
    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose or config.verbose
    ctx.obj['dry_run'] = dry_run


@cli.command('encode')
@click.argument('input_file', default='-')
@click.option('--output', '-o', type=click.Path(), help='Output file')
@click.option('--data-uri', '-u', 'mime_type', help='Wrap output in a data URI of this MIME type')
@click.pass_context
def cmd_encode(ctx, input_file, output, mime_type):
    """Encode a file (or stdin) to base64."""
    data = _read_input(input_file)

    if ctx.obj['dry_run']:
        click.echo(f"Would encode {len(data)} bytes to {encoded_length(len(data))} chars")
        return

    if mime_type:
        text = build_data_uri(data, mime_type)
    else:
        text = encode(data)
    _verbose(ctx, f"Encoded {len(data)} bytes -> {len(text)} chars")

    if output:
        _write_output(output, text)
        click.echo(f"Saved to: {output} ({len(text)} chars)", err=True)
    else:
        click.echo(text)


@cli.command('decode')
@click.argument('input_file', default='-')
@click.option('--output', '-o', type=click.Path(), help='Output file')
@click.option('--policy', '-p', type=click.Choice([p.value for p in DecodePolicy]),
              help='Malformed input handling (default: permissive, or from config)')
@click.option('--strict', '-s', is_flag=True, help='Shortcut for --policy strict')
@click.option('--raw', '-r', is_flag=True, help='Output raw bytes')
@click.option('--info', '-i', is_flag=True, help='Show sizes only')
@click.pass_context
def cmd_decode(ctx, input_file, output, policy, strict, raw, info):
    """Decode base64 text (or a base64 data URI) from a file or stdin."""
    content = _read_input(input_file).strip()

    if strict:
        policy = DecodePolicy.STRICT
    elif policy:
        policy = DecodePolicy(policy)
    else:
        policy = ctx.obj['config'].policy

    try:
        if content[:5].lower() == b'data:':
            uri = parse_data_uri(content.decode('ascii', errors='replace'), policy)
            _verbose(ctx, f"Data URI: {uri.mime_type}")
            decoded_bytes = uri.data
        else:
            decoded_bytes = decode(content, policy)
    except CodecError as e:
        raise click.ClickException(f"Decode failed: {e}")
    except ValueError as e:
        raise click.ClickException(str(e))

    if info or ctx.obj['verbose']:
        click.echo(f"Input:   {len(content)} chars ({policy.value})", err=True)
        click.echo(f"Decoded: {len(decoded_bytes)} bytes", err=True)

    if info:
        return

    if ctx.obj['dry_run']:
        click.echo(f"Would write {len(decoded_bytes)} bytes")
        return

    if raw:
        if output:
            _write_output(output, decoded_bytes, 'wb')
            click.echo(f"Saved: {output} ({len(decoded_bytes)} bytes)", err=True)
        else:
            sys.stdout.buffer.write(decoded_bytes)
            sys.stdout.flush()
        return

    try:
        decoded_text = decoded_bytes.decode('utf-8')
    except UnicodeDecodeError:
        raise click.ClickException("Payload is not UTF-8. Use --raw for binary.")

    if output:
        _write_output(output, decoded_text)
        click.echo(f"Saved: {output}", err=True)
    else:
        click.echo(decoded_text)


@cli.command('size')
@click.argument('length', type=click.IntRange(min=0))
@click.option('--decoded', '-d', is_flag=True, help='LENGTH is encoded chars; show decode capacity')
@click.option('--no-terminator', is_flag=True,
              help='Leave the NUL terminator out of the encode capacity')
@click.pass_context
def cmd_size(ctx, length, decoded, no_terminator):
    """Show output buffer sizes for LENGTH input units."""
    if decoded:
        click.echo(f"decoded capacity: {required_decoded_capacity(length)}")
        return

    terminator = ctx.obj['config'].terminator and not no_terminator
    click.echo(f"encoded length:   {encoded_length(length)}")
    click.echo(f"encoded capacity: {required_encoded_capacity(length, terminator)}")


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
