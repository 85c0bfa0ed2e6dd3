"""
Command-line front end::

    bytekit encode base64 "Man"
    bytekit decode hex "41 42"
    bytekit encrypt --mode cbc --key 000102030405060708090A0B0C0D0E0F 48656C6C6F
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from bytekit.errors import ByteKitError
from bytekit.infra.config import ConfigAdapter, copy_default_config, load_config
from bytekit.infra.logger import setup_logging
from bytekit.infra.paths import DEFAULT_CONFIG_FILENAME
from bytekit.libs.codec import b64, binary
from bytekit.libs.codec import hex as hex_codec
from bytekit.libs.crypto.cipher import AES
from bytekit.libs.text import escape
from bytekit.schemas import CodecConfig

logger = logging.getLogger(__name__)

FORMATS = ("binary", "hex", "base64")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytekit",
        description="Radix codecs and AES-128 ECB/CBC on the command line.",
    )
    parser.add_argument("--config", type=Path, help="Path to a settings file")
    parser.add_argument("--log-level", help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Encode UTF-8 text")
    enc.add_argument("format", choices=FORMATS)
    enc.add_argument("text")

    dec = sub.add_parser("decode", help="Decode radix text, print escaped bytes")
    dec.add_argument("format", choices=FORMATS)
    dec.add_argument("text")

    for name in ("encrypt", "decrypt"):
        p = sub.add_parser(name, help=f"AES-128 {name} of hex input")
        p.add_argument("data", help="Input bytes as hex")
        p.add_argument("--key", required=True, help="16-byte key as hex")
        p.add_argument("--iv", help="16-byte IV as hex (CBC only)")
        p.add_argument("--mode", choices=("ecb", "cbc"))
        if name == "decrypt":
            p.add_argument(
                "--keep-padding",
                action="store_true",
                help="Do not strip padding from the last block",
            )

    init = sub.add_parser("init-config", help="Write the sample settings file")
    init.add_argument(
        "target", nargs="?", type=Path, default=Path(DEFAULT_CONFIG_FILENAME)
    )

    return parser


def _load_adapter(config_path: Path | None) -> ConfigAdapter:
    try:
        return ConfigAdapter(load_config(config_path))
    except FileNotFoundError:
        if config_path is not None:
            raise
        return ConfigAdapter()


def _encode(fmt: str, data: bytes, codec_cfg: CodecConfig) -> str:
    if fmt == "binary":
        return binary.encode(data, delimited=codec_cfg.binary_delimited)
    if fmt == "hex":
        return hex_codec.encode(
            data, delimited=codec_cfg.hex_delimited, group=codec_cfg.hex_group
        )
    return b64.encode(data, padded=codec_cfg.base64_padded)


def _decode(fmt: str, text: str) -> bytes:
    if fmt == "binary":
        return binary.decode(text)
    if fmt == "hex":
        return hex_codec.decode(text)
    return b64.decode(text)


def _run(args: argparse.Namespace, adapter: ConfigAdapter) -> str:
    codec_cfg = adapter.get_codec_config()

    if args.command == "encode":
        return _encode(args.format, args.text.encode("utf-8"), codec_cfg)

    if args.command == "decode":
        return escape(_decode(args.format, args.text))

    cipher_cfg = adapter.get_cipher_config()
    mode = AES.MODE_ECB if (args.mode or cipher_cfg.mode) == "ecb" else AES.MODE_CBC
    iv = hex_codec.decode(args.iv) if args.iv else None
    cipher = AES.new(
        hex_codec.decode(args.key),
        mode,
        iv,
        always_pad=cipher_cfg.always_pad,
        allow_zero_iv=cipher_cfg.allow_zero_iv,
    )
    data = hex_codec.decode(args.data)

    if args.command == "encrypt":
        result = cipher.encrypt(data)
    else:
        remove_padding = cipher_cfg.remove_padding and not args.keep_padding
        result = cipher.decrypt(data, remove_padding=remove_padding)

    logger.debug("%s produced %d bytes", args.command, len(result))
    return hex_codec.encode(result, delimited=False)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command == "init-config":
        copy_default_config(args.target)
        print(f"Wrote {args.target}")
        return 0

    try:
        adapter = _load_adapter(args.config)
        setup_logging(args.log_level or adapter.get_log_level(), adapter.get_log_dir())
        print(_run(args, adapter))
    except (ByteKitError, ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
