CHUNK_SIZE = 64 * 1024


class BitWriter:
    def __init__(self, f, chunk_size: int = CHUNK_SIZE):
        self.f = f
        self.chunk_size = chunk_size
        self.nbytes = 0  # bytes handed to f so far
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)

    def write_bit(self, bit: int):
        self._cur = (self._cur << 1) | (bit & 1)
        self._nbits += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0
            if len(self._buf) >= self.chunk_size:
                self._drain()

    def write_code(self, code: str):
        """Write a '0'/'1' code string, first character first."""
        for ch in code:
            self.write_bit(ch == "1")

    def flush(self) -> int:
        """Pad remaining bits with zeros, write out. Returns payload bytes written."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        self._drain()
        return self.nbytes

    def _drain(self):
        if self._buf:
            self.f.write(self._buf)
            self.nbytes += len(self._buf)
            self._buf = bytearray()


class BitReader:
    def __init__(self, f, limit=None, chunk_size: int = CHUNK_SIZE):
        self.f = f
        self.remaining = limit  # bytes still allowed from f, None = until EOF
        self.chunk_size = chunk_size
        self.data = b""
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    def _refill(self) -> bool:
        n = self.chunk_size
        if self.remaining is not None:
            n = min(n, self.remaining)
            if n <= 0:
                return False
        self.data = self.f.read(n)
        self.i = 0
        if self.remaining is not None:
            self.remaining -= len(self.data)
        return len(self.data) > 0

    def read_bit(self) -> int:
        if self.i >= len(self.data) and not self._refill():
            raise EOFError("End of bitstream")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b
