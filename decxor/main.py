# DECXOR OBFUSCATION ENGINE ->

import os as _os_module
import pathlib as _pathlib_module
import sys as _sys_module

# Keys are parsed with int() well past the default 4300-digit guard
if hasattr(_sys_module, "set_int_max_str_digits"):
    _sys_module.set_int_max_str_digits(0)  # 0 = unlimited

from .errors import (
    DecxorError,
    FileOpenError,
    FileWriteError,
    InvalidDirection,
    InvalidKeyFormat,
    MissingInputDirectory,
)


def _cli_config_path() -> _pathlib_module.Path:
    cfg = _os_module.getenv("DECXOR_CLI_CONFIG")
    if cfg:
        return _pathlib_module.Path(cfg).expanduser()
    xdg = _os_module.getenv("XDG_CONFIG_HOME")
    if xdg:
        return _pathlib_module.Path(xdg) / "decxor" / "cli.conf"
    appdata = _os_module.getenv("APPDATA")
    if appdata:
        return _pathlib_module.Path(appdata) / "decxor" / "cli.conf"
    return _pathlib_module.Path("~/.config/decxor/cli.conf").expanduser()


def _cli_plain_mode() -> bool:
    if _os_module.getenv("DECXOR_CLI_PLAIN"):
        return True
    if _os_module.getenv("NO_COLOR"):
        return True
    style = (_os_module.getenv("DECXOR_CLI_STYLE") or "").strip().lower()
    if style in {"plain", "boring", "0", "false", "off"}:
        return True
    if style in {"color", "emoji", "on"}:
        return False
    cfg_path = _cli_config_path()
    try:
        if cfg_path.exists():
            data = cfg_path.read_text(encoding="utf-8").lower()
            if "plain=1" in data or "plain=true" in data or "style=plain" in data:
                return True
    except OSError:
        pass
    return False


class decxor:
    import sys
    import os
    import pathlib
    import typing
    import tempfile
    import shutil
    import time
    import colorama
    import numpy as np
    colorama.just_fix_windows_console()

    @staticmethod
    def _env_int(name: str) -> "decxor.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "1.0.0"
    ENC_SUFFIX = ".enc"
    # direction -> (default input dir, default output dir)
    DEFAULT_DIRS: typing.ClassVar[dict[str, tuple[str, str]]] = {
        "enc": ("raw", "encrypted"),
        "dec": ("encrypted", "decrypted"),
    }
    STREAM_CHUNK_SIZE = 4 * 1024 * 1024  # 4 MiB read blocks
    _CHUNK_SIZE_ENV = _env_int("DECXOR_CHUNK_SIZE")
    if _CHUNK_SIZE_ENV is not None:
        STREAM_CHUNK_SIZE = _CHUNK_SIZE_ENV
    ADD_FAST_MIN = 4 * 1024  # use NumPy for chunks >= this size
    PROGRESS_BAR_WIDTH = 30
    # Native int handles keys up to this many digits; longer ones use _divmod256
    _DECIMAL_INT_LIMIT = 100_000
    _DIVMOD_GROUP = 9
    _DIGITS = frozenset("0123456789")
    _DIRECTION_MAP: typing.ClassVar[dict[str, str]] = {
        "enc": "enc",
        "encrypt": "enc",
        "forward": "enc",
        "obfuscate": "enc",
        "+": "enc",
        "dec": "dec",
        "decrypt": "dec",
        "inverse": "dec",
        "reveal": "dec",
        "-": "dec",
    }

    class _ProgressReporter:
        """Single-line progress bar on a TTY plus a completion line per file."""

        def __init__(self, total_files: int, stream=None, err_stream=None, min_interval: float = 0.1):
            self.total_files = max(total_files, 1)
            self.stream = stream or decxor.sys.stdout
            self.err_stream = err_stream or decxor.sys.stderr
            self._min_interval = max(0.0, float(min_interval))
            self._is_tty = bool(getattr(self.stream, "isatty", lambda: False)())
            self._colors = self._is_tty and not _cli_plain_mode()
            self._last_render = 0.0
            self._active = False
            fore = decxor.colorama.Fore
            self._green = fore.GREEN if self._colors else ""
            self._reset = decxor.colorama.Style.RESET_ALL if self._colors else ""
            # err_stream gets its own TTY check
            err_colors = bool(getattr(self.err_stream, "isatty", lambda: False)()) and not _cli_plain_mode()
            self._err_red = fore.RED if err_colors else ""
            self._err_reset = decxor.colorama.Style.RESET_ALL if err_colors else ""

        def _render_bar(self, fraction: float, width: int | None = None) -> str:
            width = width or decxor.PROGRESS_BAR_WIDTH
            fraction = max(0.0, min(1.0, fraction))
            filled = int(fraction * width)
            if filled >= width:
                return f"({self._green}{'❚' * width}{self._reset})"
            return f"({'❚' * filled}{' ' * (width - filled)})"

        def _clear(self) -> None:
            if self._active:
                self.stream.write("\r\x1b[2K")
                self.stream.flush()
                self._active = False

        def update(self, file_index: int, fraction: float, path: "decxor.pathlib.Path") -> None:
            # Non-TTY output only gets the completion lines.
            if not self._is_tty:
                return
            now = decxor.time.monotonic()
            if self._active and fraction < 1.0 and (now - self._last_render) < self._min_interval:
                return
            bar = self._render_bar(fraction)
            line = (
                f"File {file_index + 1}/{self.total_files} {bar} "
                f"{fraction * 100:3.0f}% [{path.name}]"
            )
            self.stream.write("\r\x1b[2K" + line)
            self.stream.flush()
            self._active = True
            self._last_render = now

        def finalize_file(
            self,
            file_index: int,
            src: "decxor.pathlib.Path",
            dst: "decxor.pathlib.Path"
        ) -> None:
            self._clear()
            mark = f" {self._green}✓{self._reset}" if self._colors else ""
            self.stream.write(f"Processed: {src.name} -> {dst.name}{mark}\n")
            self.stream.flush()

        def fail_file(self, file_index: int, path: "decxor.pathlib.Path", exc: BaseException) -> None:
            self._clear()
            print(f"{self._err_red}Failed: {path.name}: {exc}{self._err_reset}", file=self.err_stream)

    # ------------------------------------------------------------------
    # Key derivation
    # ------------------------------------------------------------------

    @staticmethod
    def _strip_leading_zeros(number: str) -> str:
        if not number:
            return "0"
        stripped = number.lstrip("0")
        return stripped if stripped else "0"

    @staticmethod
    def _validate_decimal(decimal: str) -> str:
        if not isinstance(decimal, str):
            raise InvalidKeyFormat(
                f"Key must be a decimal string, not {type(decimal).__name__}"
            )
        if not decimal or not decxor._DIGITS.issuperset(decimal):
            raise InvalidKeyFormat("Invalid key input. Must be a non-empty numeric decimal string.")
        return decimal

    @staticmethod
    def _divmod256(decimal: str) -> "decxor.typing.Tuple[str, int]":
        """Long-divide a decimal digit string by 256.

        Returns the quotient as a digit string without leading zeros ("0" when
        the quotient is zero) and the remainder in [0, 255]. Digits are consumed
        `_DIVMOD_GROUP` at a time; the carried remainder stays below 256.
        """
        group = decxor._DIVMOD_GROUP
        width = len(decimal) % group or group
        parts = []
        remainder = 0
        pos = 0
        while pos < len(decimal):
            value = remainder * 10 ** width + int(decimal[pos:pos + width])
            q, remainder = divmod(value, 256)
            parts.append(f"{q:0{width}d}")
            pos += width
            width = group
        return ("".join(parts).lstrip("0") or "0"), remainder

    @staticmethod
    def _decimal_to_bytes_long(decimal: str) -> bytes:
        number = decxor._strip_leading_zeros(decimal)
        out = bytearray()
        while number != "0":
            number, remainder = decxor._divmod256(number)
            out.append(remainder)
        if not out:
            out.append(0)
        out.reverse()
        return bytes(out)

    @staticmethod
    def derive_key(decimal: str) -> bytes:
        """
        Convert a decimal numeral of any length into big-endian key bytes.

        Args:
            decimal: ASCII digits only, leading zeros allowed

        Returns:
            The base-256 representation, most significant byte first.
            "0" gives b"\\x00"; no other value has a leading zero byte.

        Raises:
            InvalidKeyFormat: empty input or a non-digit character
        """
        text = decxor._validate_decimal(decimal)
        # Native int is exact for short keys; the digit-string division
        # handles any length without building a huge int.
        if len(text) <= decxor._DECIMAL_INT_LIMIT:
            value = int(text)
            return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")
        return decxor._decimal_to_bytes_long(text)

    @staticmethod
    def key_fingerprint(key: "decxor.typing.Union[bytes, bytearray, memoryview]") -> str:
        return bytes(key).hex()

    @staticmethod
    def _coerce_key(key: "decxor.typing.Union[str, bytes, bytearray, memoryview]") -> bytes:
        if isinstance(key, (bytes, bytearray, memoryview)):
            material = bytes(key)
            if not material:
                raise InvalidKeyFormat("Key bytes must not be empty")
            return material
        return decxor.derive_key(key)

    # ------------------------------------------------------------------
    # Keystream transform
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize_direction(direction: str) -> str:
        if isinstance(direction, str):
            normalized = decxor._DIRECTION_MAP.get(direction.strip().lower())
            if normalized:
                return normalized
        raise InvalidDirection(f"Invalid mode {direction!r}. Use 'enc' or 'dec'.")

    @staticmethod
    def apply_keystream(chunk: bytes, key: bytes, offset: int, direction: str) -> bytes:
        """Add (enc) or subtract (dec) key[(offset + i) % len(key)] from chunk[i], mod 256."""
        inverse = decxor._normalize_direction(direction) == "dec"
        if not key:
            raise InvalidKeyFormat("Key bytes must not be empty")
        if not chunk:
            return b""
        key_len = len(key)
        start = offset % key_len
        n = len(chunk)
        if n >= decxor.ADD_FAST_MIN:
            np = decxor.np
            data = np.frombuffer(chunk, dtype=np.uint8)
            key_arr = np.frombuffer(bytes(key), dtype=np.uint8)
            stream = np.resize(np.roll(key_arr, -start), n)
            # uint8 arithmetic wraps modulo 256
            if inverse:
                return np.subtract(data, stream).tobytes()
            return np.add(data, stream).tobytes()
        out = bytearray(n)
        for i, byte in enumerate(chunk):
            k = key[(start + i) % key_len]
            out[i] = (byte - k) & 0xFF if inverse else (byte + k) & 0xFF
        return bytes(out)

    class _KeystreamCursor:
        """Absolute byte offset of one file, carried across chunk boundaries."""

        def __init__(self, key: bytes, direction: str):
            if not key:
                raise InvalidKeyFormat("Key bytes must not be empty")
            self._key = bytes(key)
            self._direction = decxor._normalize_direction(direction)
            self.offset = 0

        def apply(self, chunk: bytes) -> bytes:
            out = decxor.apply_keystream(chunk, self._key, self.offset, self._direction)
            self.offset += len(chunk)
            return out

    @staticmethod
    def _resolve_chunk_size(chunk_size: "decxor.typing.Optional[int]") -> int:
        if chunk_size is None:
            return decxor.STREAM_CHUNK_SIZE
        return max(1, int(chunk_size))

    @staticmethod
    def transform_bytes(
        data: "decxor.typing.Union[bytes, bytearray, memoryview]",
        key: "decxor.typing.Union[str, bytes, bytearray, memoryview]",
        direction: str
    ) -> bytes:
        material = decxor._coerce_key(key)
        return decxor.apply_keystream(bytes(data), material, 0, direction)

    @staticmethod
    def transform_stream(
        source,
        dest,
        key: "decxor.typing.Union[str, bytes, bytearray, memoryview]",
        direction: str,
        *,
        chunk_size: int | None = None,
        progress_cb: "decxor.typing.Optional[decxor.typing.Callable[[int], None]]" = None
    ) -> int:
        """
        Stream `source` into `dest` through the additive keystream.

        Reads fixed-size chunks and writes each transformed chunk immediately.
        The key cursor restarts at 0 for every call, so one call equals one
        file. Output length always equals input length.

        Returns:
            Number of bytes processed.

        Raises:
            FileOpenError: the source could not be read
            FileWriteError: the sink could not be written
        """
        material = decxor._coerce_key(key)
        cursor = decxor._KeystreamCursor(material, direction)
        chunk = decxor._resolve_chunk_size(chunk_size)
        processed = 0
        while True:
            try:
                buf = source.read(chunk)
            except OSError as exc:
                raise FileOpenError(f"Failed to read input: {exc}") from exc
            if not buf:
                break
            out = cursor.apply(buf)
            try:
                dest.write(out)
            except OSError as exc:
                raise FileWriteError(f"Failed to write output: {exc}") from exc
            processed += len(buf)
            if progress_cb:
                progress_cb(processed)
        try:
            dest.flush()
        except OSError as exc:
            raise FileWriteError(f"Failed to flush output: {exc}") from exc
        return processed

    # ------------------------------------------------------------------
    # Files and directories
    # ------------------------------------------------------------------

    @staticmethod
    def output_name(name: str, direction: str, suffix: str = ENC_SUFFIX) -> str:
        mode = decxor._normalize_direction(direction)
        if not suffix:
            raise ValueError("Output suffix must not be empty")
        if mode == "enc":
            return name + suffix
        if len(name) > len(suffix) and name.endswith(suffix):
            return name[:-len(suffix)]
        return name

    @staticmethod
    def _normalize_path(path_like: "decxor.typing.Union[str, decxor.pathlib.Path]") -> "decxor.pathlib.Path":
        if isinstance(path_like, decxor.pathlib.Path):
            path = path_like
        else:
            path = decxor.pathlib.Path(str(path_like))
        path = path.expanduser()
        try:
            return path.resolve(strict=False)
        except OSError:
            return path

    @staticmethod
    def _list_input_files(input_dir: "decxor.pathlib.Path") -> "decxor.typing.List[decxor.pathlib.Path]":
        return sorted((entry for entry in input_dir.iterdir() if entry.is_file()), key=lambda p: p.name)

    @staticmethod
    def _remove_quietly(path: str) -> None:
        try:
            decxor.os.remove(path)
        except FileNotFoundError:
            pass

    @staticmethod
    def process_file(
        path: "decxor.typing.Union[str, decxor.pathlib.Path]",
        key: "decxor.typing.Union[str, bytes, bytearray, memoryview]",
        direction: str,
        output_dir: "decxor.typing.Union[str, decxor.pathlib.Path]",
        *,
        suffix: str = ENC_SUFFIX,
        chunk_size: int | None = None,
        reporter: "decxor.typing.Optional[decxor._ProgressReporter]" = None,
        file_index: int = 0
    ) -> "decxor.pathlib.Path":
        """
        Transform one file into `output_dir` and return the written path.

        Output goes to a hidden `.part` file next to the target and is renamed
        into place only after the whole stream succeeded; on failure the
        partial file is removed.
        """
        mode = decxor._normalize_direction(direction)
        material = decxor._coerce_key(key)
        src = decxor._normalize_path(path)
        out_dir = decxor._normalize_path(output_dir)
        target = out_dir / decxor.output_name(src.name, mode, suffix)
        try:
            source = open(src, "rb")
        except OSError as exc:
            raise FileOpenError(f"Failed to open input file: {src}: {exc}") from exc

        tmp_name = None
        committed = False
        try:
            with source:
                total = decxor.os.fstat(source.fileno()).st_size
                try:
                    out_dir.mkdir(parents=True, exist_ok=True)
                    sink = decxor.tempfile.NamedTemporaryFile(
                        "wb",
                        dir=out_dir,
                        prefix=f".{target.name}.",
                        suffix=".part",
                        delete=False
                    )
                except OSError as exc:
                    raise FileWriteError(f"Failed to open output file: {target}: {exc}") from exc
                tmp_name = sink.name

                progress_cb = None
                if reporter is not None:
                    def progress_cb(done: int) -> None:
                        reporter.update(file_index, done / total if total else 1.0, src)

                with sink:
                    decxor.transform_stream(
                        source,
                        sink,
                        material,
                        mode,
                        chunk_size=chunk_size,
                        progress_cb=progress_cb
                    )
            try:
                decxor.shutil.copymode(src, tmp_name)
                decxor.os.replace(tmp_name, target)
            except OSError as exc:
                raise FileWriteError(f"Failed to finalize output file: {target}: {exc}") from exc
            committed = True
        finally:
            if tmp_name is not None and not committed:
                decxor._remove_quietly(tmp_name)

        if reporter is not None:
            reporter.finalize_file(file_index, src, target)
        return target

    @staticmethod
    def process_directory(
        input_dir: "decxor.typing.Union[str, decxor.pathlib.Path]",
        key: "decxor.typing.Union[str, bytes, bytearray, memoryview]",
        direction: str,
        output_dir: "decxor.typing.Optional[decxor.typing.Union[str, decxor.pathlib.Path]]" = None,
        *,
        suffix: str = ENC_SUFFIX,
        chunk_size: int | None = None,
        silent: bool = False
    ) -> "decxor.typing.Dict[str, str]":
        """
        Obfuscate or reveal every regular file in `input_dir`.

        Direction and key are validated before the directory is touched.
        A file that cannot be read or written is reported and skipped; the
        rest of the batch still runs.

        Returns:
            {input path: "SUCCESS!" | "FAIL! <reason>"}

        Raises:
            InvalidDirection, InvalidKeyFormat, MissingInputDirectory
        """
        mode = decxor._normalize_direction(direction)
        material = decxor._coerce_key(key)
        src_dir = decxor._normalize_path(input_dir)
        if not src_dir.is_dir():
            raise MissingInputDirectory(f"Input directory does not exist: {src_dir}")
        if output_dir is None:
            output_dir = decxor.DEFAULT_DIRS[mode][1]
        out_dir = decxor._normalize_path(output_dir)

        # Snapshot first so output written into a shared directory is not picked up.
        paths = decxor._list_input_files(src_dir)
        reporter = decxor._ProgressReporter(len(paths)) if not silent else None
        results: dict[str, str] = {}
        start = decxor.time.monotonic()
        for idx, path in enumerate(paths):
            try:
                decxor.process_file(
                    path,
                    material,
                    mode,
                    out_dir,
                    suffix=suffix,
                    chunk_size=chunk_size,
                    reporter=reporter,
                    file_index=idx
                )
                results[str(path)] = "SUCCESS!"
            except (DecxorError, OSError) as exc:
                results[str(path)] = f"FAIL! {exc}"
                if reporter is not None:
                    reporter.fail_file(idx, path, exc)
                else:
                    print(f"Failed: {path.name}: {exc}", file=decxor.sys.stderr)
        elapsed = decxor.time.monotonic() - start
        if not silent:
            print(f"Total time: {elapsed:.3f} seconds")
        return results


def cli(argv=None) -> int:
    import argparse

    class _CliTheme:
        def __init__(self, plain: bool):
            fore = decxor.colorama.Fore
            style = decxor.colorama.Style
            self.plain = plain
            self.reset = "" if plain else style.RESET_ALL
            self.bold = "" if plain else style.BRIGHT
            self.red = "" if plain else fore.RED
            self.green = "" if plain else fore.GREEN
            self.yellow = "" if plain else fore.YELLOW
            self.cyan = "" if plain else fore.CYAN

        def _wrap(self, msg: str, color: str, emoji: str | None = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow, "⚠️")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

        def info(self, msg: str) -> str:
            return self._wrap(msg, self.cyan, "✨")

    theme = _CliTheme(_cli_plain_mode())

    def _resolve_key_text(args) -> str:
        if args.key is not None:
            return args.key.strip()
        if args.key_file:
            key_path = decxor.pathlib.Path(args.key_file).expanduser()
            try:
                return key_path.read_text(encoding="utf-8").strip()
            except UnicodeDecodeError as exc:
                raise InvalidKeyFormat(f"Key file {key_path} is not UTF-8 decimal text") from exc
        env_key = _os_module.getenv("DECXOR_KEY")
        if env_key:
            return env_key.strip()
        try:
            return input("digital key (decimal, arbitrary length): ").strip()
        except EOFError:
            return ""

    parser = argparse.ArgumentParser(prog="decxor", description="Decimal-key additive file obfuscator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    directions = (
        ("enc", ["obfuscate", "forward"], "Obfuscate every file in a directory (default ./raw -> ./encrypted)"),
        ("dec", ["reveal", "inverse"], "Reveal every file in a directory (default ./encrypted -> ./decrypted)"),
    )
    for name, aliases, help_text in directions:
        sub = subparsers.add_parser(name, aliases=aliases, help=help_text)
        sub.add_argument(
            "-k", "--key",
            default=None,
            help="Decimal key of any length (prompted for when omitted)"
        )
        sub.add_argument(
            "--key-file",
            default=None,
            help="Read the decimal key from a file"
        )
        sub.add_argument(
            "-i", "--input",
            default=None,
            help="Input directory"
        )
        sub.add_argument(
            "-o", "--output",
            default=None,
            help="Output directory"
        )
        sub.add_argument(
            "--suffix",
            default=decxor.ENC_SUFFIX,
            help="Suffix appended on obfuscate and stripped on reveal"
        )
        sub.add_argument(
            "--chunk-size",
            type=int,
            default=None,
            help="Read block size in bytes (default 4 MiB or DECXOR_CHUNK_SIZE)"
        )
        sub.add_argument(
            "--silent",
            action="store_true",
            help="Only report failures"
        )

    key_cmd = subparsers.add_parser(
        "key",
        help="Show the key bytes derived from a decimal key"
    )
    key_cmd.add_argument("digits", help="Decimal key")

    args = parser.parse_args(argv)

    if args.command == "key":
        try:
            key = decxor.derive_key(args.digits.strip())
        except InvalidKeyFormat as exc:
            print(theme.err(str(exc)), file=_sys_module.stderr)
            return 1
        print(f"{decxor.key_fingerprint(key)} ({len(key)} bytes)")
        return 0

    mode = decxor._normalize_direction(args.command)
    if args.chunk_size is not None and args.chunk_size <= 0:
        parser.error("--chunk-size must be a positive integer")
    if not args.suffix:
        parser.error("--suffix must not be empty")

    try:
        key = decxor.derive_key(_resolve_key_text(args))
    except OSError as exc:
        print(theme.err(f"Failed to read key file: {exc}"), file=_sys_module.stderr)
        return 1
    except InvalidKeyFormat as exc:
        print(theme.err(str(exc)), file=_sys_module.stderr)
        return 1

    default_in, default_out = decxor.DEFAULT_DIRS[mode]
    input_dir = args.input or default_in
    output_dir = args.output or default_out
    if not args.silent:
        verb = "Obfuscating" if mode == "enc" else "Revealing"
        print(theme.info(f"{verb} {input_dir} -> {output_dir}"))
    try:
        results = decxor.process_directory(
            input_dir,
            key,
            mode,
            output_dir,
            suffix=args.suffix,
            chunk_size=args.chunk_size,
            silent=args.silent
        )
    except (DecxorError, OSError) as exc:
        print(theme.err(str(exc)), file=_sys_module.stderr)
        return 1

    failures = sum(1 for status in results.values() if status != "SUCCESS!")
    if failures:
        print(theme.err(f"{failures} of {len(results)} files failed"), file=_sys_module.stderr)
        return 1
    if not args.silent:
        if results:
            print(theme.ok(f"{len(results)} files processed"))
        else:
            print(theme.warn(f"No files found in {input_dir}"))
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
