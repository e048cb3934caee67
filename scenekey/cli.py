"""
Command-line front end for the scene key codec.

Run with `python -m scenekey.cli <command>` (or the `scenekey` script):
- encode TEXT        -> prints the Base64 ciphertext
- decode CIPHERTEXT  -> prints the plaintext
- scenes FILE        -> prints one decrypted scene key per line

The key defaults to SCENE_KEY from the environment / .env file.
"""

import argparse
import pathlib
import sys
from typing import List, Optional

from scenekey.common import config, log
from scenekey.crypto import aes
from scenekey import scenes


def _resolve_key(args: argparse.Namespace) -> str:
    return args.key if args.key is not None else config.get_scene_key()


def cmd_encode(args: argparse.Namespace) -> None:
    print(aes.encode(args.text, _resolve_key(args)))


def cmd_decode(args: argparse.Namespace) -> None:
    print(aes.decode(args.ciphertext, _resolve_key(args)))


def cmd_scenes(args: argparse.Namespace) -> None:
    payload = pathlib.Path(args.file).read_bytes()
    resolve = scenes.active_scene_keys if args.active_only else scenes.decrypt_scene_keys
    for scene_key in resolve(payload, _resolve_key(args)):
        print(scene_key)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scenekey",
        description="Encrypt and decrypt scene keys (AES-256-CBC, zero IV, Base64)."
    )
    key_parent = argparse.ArgumentParser(add_help=False)
    key_parent.add_argument(
        "--key",
        type=str,
        default=None,
        help="Key string, ASCII, at most 32 characters (default: $SCENE_KEY)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", parents=[key_parent], help="Encrypt a string.")
    p_encode.add_argument("text", type=str)
    p_encode.set_defaults(func=cmd_encode)

    p_decode = sub.add_parser("decode", parents=[key_parent], help="Decrypt a Base64 ciphertext.")
    p_decode.add_argument("ciphertext", type=str)
    p_decode.set_defaults(func=cmd_decode)

    p_scenes = sub.add_parser(
        "scenes", parents=[key_parent], help="Decrypt every sceneKey in a scene-list JSON file."
    )
    p_scenes.add_argument("file", type=str)
    p_scenes.add_argument(
        "--active-only",
        action="store_true",
        help="Only decrypt scenes flagged is_active"
    )
    p_scenes.set_defaults(func=cmd_scenes)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and run the selected command.
    Returns the process exit code.
    """
    config.load_env()
    log.configure_logging()
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (ValueError, OSError) as e:
        # SceneKeyError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
