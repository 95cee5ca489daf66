"""File-oriented convenience wrappers."""

from .main import decxor


def encrypt_file(
    file: str,
    code: str | bytes,
    output_dir: str | None = None,
    *,
    suffix: str = decxor.ENC_SUFFIX,
    chunk_size: int | None = None,
):
    return decxor.process_file(
        file,
        code,
        "enc",
        output_dir if output_dir is not None else decxor.DEFAULT_DIRS["enc"][1],
        suffix=suffix,
        chunk_size=chunk_size,
    )


def decrypt_file(
    file: str,
    code: str | bytes,
    output_dir: str | None = None,
    *,
    suffix: str = decxor.ENC_SUFFIX,
    chunk_size: int | None = None,
):
    return decxor.process_file(
        file,
        code,
        "dec",
        output_dir if output_dir is not None else decxor.DEFAULT_DIRS["dec"][1],
        suffix=suffix,
        chunk_size=chunk_size,
    )


def encrypt_dir(
    input_dir: str,
    code: str | bytes,
    output_dir: str | None = None,
    *,
    suffix: str = decxor.ENC_SUFFIX,
    chunk_size: int | None = None,
    silent: bool = False,
):
    return decxor.process_directory(
        input_dir,
        code,
        "enc",
        output_dir,
        suffix=suffix,
        chunk_size=chunk_size,
        silent=silent,
    )


def decrypt_dir(
    input_dir: str,
    code: str | bytes,
    output_dir: str | None = None,
    *,
    suffix: str = decxor.ENC_SUFFIX,
    chunk_size: int | None = None,
    silent: bool = False,
):
    return decxor.process_directory(
        input_dir,
        code,
        "dec",
        output_dir,
        suffix=suffix,
        chunk_size=chunk_size,
        silent=silent,
    )


def process_directory(
    input_dir: str,
    code: str | bytes,
    direction: str,
    output_dir: str | None = None,
    *,
    suffix: str = decxor.ENC_SUFFIX,
    chunk_size: int | None = None,
    silent: bool = False,
):
    return decxor.process_directory(
        input_dir,
        code,
        direction,
        output_dir,
        suffix=suffix,
        chunk_size=chunk_size,
        silent=silent,
    )


def transform_stream(
    source,
    dest,
    code: str | bytes,
    direction: str,
    chunk_size: int | None = None,
):
    return decxor.transform_stream(
        source,
        dest,
        code,
        direction,
        chunk_size=chunk_size,
    )


__all__ = [
    "decrypt_dir",
    "decrypt_file",
    "encrypt_dir",
    "encrypt_file",
    "process_directory",
    "transform_stream",
]
