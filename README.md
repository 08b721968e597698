# fenris

Common building blocks for a file transfer client and server.

## Modules

- `fenris.compression`: zlib compression.
  `compress_data(data, level=6)` compresses at a level from 0 to 9;
  `decompress_data(data, original_size)` decompresses a stream whose output
  must fit in `original_size` bytes. Empty input gives empty output. Failures
  raise `CompressionError`, whose `kind` is a `CompressionErrorKind`
  (`INVALID_LEVEL`, `BUFFER_TOO_SMALL`, `INVALID_DATA`, ...).
- `fenris.crypto`:
  - AES-GCM with a 16, 24 or 32 byte key and a 12 byte IV:
    `encrypt_data_aes_gcm(plaintext, key, iv)` returns the ciphertext with the
    16 byte tag appended; `decrypt_data_aes_gcm(ciphertext, key, iv)` checks
    the tag. Failures raise `EncryptionError` with an `EncryptionErrorKind`.
  - ECDH on NIST P-256: `generate_ecdh_keypair()` returns a 32 byte private
    key and a 65 byte uncompressed public key;
    `compute_ecdh_shared_secret(private_key, peer_public_key)` returns the
    shared secret.
  - `derive_key_from_shared_secret(shared_secret, key_size=32, context=b"")`
    derives an AES key with HKDF-SHA256; `context` changes the result.
    Failures raise `ECDHError` with an `ECDHErrorKind`.
- `fenris.file_operations`: `read_file`, `write_file`, `append_file`,
  `create_file`, `delete_file`, `get_file_info`, `file_exists`,
  `get_file_size`, `create_directory`, `create_directories`,
  `delete_directory(dirpath, recursive=False)`, `list_directory`,
  `change_directory`, `get_current_directory`, `rename_path` and `copy_file`.
  Failures raise `FileError`, whose `kind` is a `FileErrorKind`
  (`FILE_NOT_FOUND`, `PERMISSION_DENIED`, `FILE_ALREADY_EXISTS`,
  `DIRECTORY_NOT_EMPTY`, `INVALID_PATH`, `DIRECTORY_ALREADY_EXISTS`, ...).
  `file_error_from_os_error(error)` turns an `OSError` into a `FileError`.
- `fenris.log`: logger setup with console output and size-rotated file output.
  `LoggingConfig` holds the level, the outputs, the log file path, the maximum
  file size and the number of files kept. `initialize_logging(config,
  logger_name="fenris")` configures and returns a logger, `get_logger(name)`
  returns it (or the default logger), `set_log_level(level)` changes every
  registered logger, and `log_level_to_string(level)` names a `LogLevel`.
- `fenris.client` and `fenris.server`: the `ServerInfo` and `ClientInfo`
  records describing the other end of a connection, and the `main` entry
  points of the two commands.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from fenris.crypto import (
    compute_ecdh_shared_secret,
    decrypt_data_aes_gcm,
    derive_key_from_shared_secret,
    encrypt_data_aes_gcm,
    generate_ecdh_keypair,
)

alice_private, alice_public = generate_ecdh_keypair()
bob_private, bob_public = generate_ecdh_keypair()

alice_key = derive_key_from_shared_secret(
    compute_ecdh_shared_secret(alice_private, bob_public), 32
)
bob_key = derive_key_from_shared_secret(
    compute_ecdh_shared_secret(bob_private, alice_public), 32
)

iv = bytes(12)
ciphertext = encrypt_data_aes_gcm(b"hello", alice_key, iv)
assert decrypt_data_aes_gcm(ciphertext, bob_key, iv) == b"hello"
```

## Commands

```
fenris-client
fenris-server
```

Each sets up logging to the console and to `fenris_client.log` or
`fenris_server.log` (the client at debug level, the server at info level),
logs its start-up and shut-down, and exits with status 0. If the log file
cannot be opened it prints an error and exits with status 1.

## What it does not do

The commands do not open network connections, exchange keys or transfer
files, and the package has no message format for requests and responses.
It provides the pieces such a client and server would be built from:
compression, encryption, key agreement, file operations and logging.