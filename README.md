# sigtalk

`sigtalk` sends a text message from one process to another using only the
POSIX user signals. Each byte travels as eight signals, most significant bit
first: `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. A message ends
with a zero byte.

The server echoes every signal back to the process that sent the first bit of
the current byte, and writes each byte to standard output once all eight of
its bits have arrived. After the closing zero byte it also writes a newline.

The client works on any POSIX system. The server waits for signals with
`signal.sigwaitinfo`, so it needs a platform that provides it, such as Linux.

## Installing

```
pip install .
```

## Running

Start the server in one terminal. It prints its process id and waits:

```
sigtalk-server
```

From another terminal, send it a message:

```
sigtalk-client <server pid> "Hello there"
```

The client sends the UTF-8 bytes of the message, pausing 0.6 ms after every
signal, and prints an empty line after each byte. For every acknowledgement
the server sends back it prints `SIGUSR1 recieved by server` or
`SIGUSR2 recieved by server`.

Exit statuses of the client:

- `1`: wrong number of arguments; the usage line is printed to standard error.
- `2`: the server process could not be signalled.
- `0`: the message and its zero byte were sent.

The server runs until it is stopped; on Ctrl-C `main` returns 130.

## Using it from Python

The wire format lives in `sigtalk.protocol`:

```python
from sigtalk.protocol import ByteAssembler, encode_byte, encode_message

bits = encode_byte(ord("A"))          # (0, 1, 0, 0, 0, 0, 0, 1)
assembler = ByteAssembler()
for bit in bits:
    value = assembler.feed(bit)       # None until the eighth bit arrives
print(chr(value))                     # "A"

all_bits = list(encode_message("hi")) # 8 bits per byte, then 8 zero bits
```

`encode_byte` raises `ValueError` for values outside 0–255, and
`ByteAssembler.feed` for anything other than 0 or 1.

`sigtalk.server.Server` takes a writable binary stream (standard output by
default). Its `handle(signo, sender_pid)` method processes one signal and
returns the byte it completes, or `None`, so it can be driven without real
signals; any signal other than `SIGUSR1`/`SIGUSR2` raises `ValueError`.
`serve_forever()` blocks the two signals and handles them as they arrive.

`sigtalk.client.send_byte(server_pid, value, delay)` and
`send_message(server_pid, message, delay)` do the sending; `send_message`
returns the number of bytes sent, including the zero byte. Both raise
`SendError` (a subclass of `OSError`) when a signal cannot be delivered.

The package also carries the small text helpers the programs rely on:

- `sigtalk.chars`: ASCII character classes (`is_space`, `is_ascii`,
  `is_alpha`, `is_digit`, `is_alnum`, `is_print`), `to_lower`, `to_upper`,
  `atoi` (leading whitespace, one optional sign, digits up to the first
  non-digit) and `itoa`.
- `sigtalk.strings`: `find_char`, `rfind_char`, `compare`, `compare_bytes`,
  `find_within`, `split` (drops empty pieces), `trim`, `substr` and `join`.
- `sigtalk.lines`: `LineReader` and `get_next_line`, which read a raw file
  descriptor line by line as `bytes`, keeping a separate buffer for each
  descriptor and returning `None` when nothing is left.
- `sigtalk.formatting`: `sprintf`, returning `bytes`, and `printf`, writing to
  standard output and returning the byte count. They support the conversions
  `c s p d i u x X %`, the flags `#`, `+`, `0`, space, `-` and `.`, and a
  width. `apply_flags` applies the flags of one specification to a converted
  value. Malformed specifications and missing arguments raise `FormatError`.
- `sigtalk.printf_spec`: `Spec`, `parse_spec`, `is_valid` and `convert` for
  single conversion specifications. Flags are accepted only in the order
  `# + 0 space . -`, and only with the conversions that allow them
  (`#` with `x X`; `+` with `d i`; `0` with `d i u x X`; space with `d i s`).

## Limits

The client does not wait for acknowledgements: it only prints them and relies
on its fixed delay between signals. Nothing is retransmitted, and the server
does not separate messages from several clients sending at the same time.

## Tests

```
pip install ".[test]"
pytest
```