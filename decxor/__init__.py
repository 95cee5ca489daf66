"""
DECXOR - batch file obfuscation with an arbitrary-length decimal key

Every byte is shifted by a repeating keystream taken from the base-256 form of
the key: obfuscate adds (mod 256), reveal subtracts. This is obfuscation, not
encryption.
"""

from .main import decxor, cli
from .errors import (
    DecxorError,
    FileOpenError,
    FileWriteError,
    InvalidDirection,
    InvalidKeyFormat,
    MissingInputDirectory,
)
from .api_keys import (
    derive_key,
    key_fingerprint,
    obfuscate_bytes,
    output_name,
    reveal_bytes,
    transform_bytes,
)
from .api_files import (
    decrypt_dir,
    decrypt_file,
    encrypt_dir,
    encrypt_file,
    process_directory,
    transform_stream,
)
from .version import __version__
