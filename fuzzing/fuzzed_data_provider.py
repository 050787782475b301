import io
from typing import Optional

from atheris import FuzzedDataProvider


class RletextFuzzedDataProvider(FuzzedDataProvider):  # type: ignore[misc]
    def ConsumeRandomBytes(self) -> bytes:
        int_range = self.ConsumeIntInRange(0, self.remaining_bytes())
        return bytes(self.ConsumeBytes(int_range))

    def ConsumeRemainingBytes(self) -> bytes:
        return bytes(self.ConsumeBytes(self.remaining_bytes()))

    def ConsumeMemoryFile(self, all_data: bool = False) -> io.BytesIO:
        if all_data:
            return io.BytesIO(self.ConsumeRemainingBytes())
        else:
            return io.BytesIO(self.ConsumeRandomBytes())

    def ConsumeOptionalInt(self, min: int, max: int) -> Optional[int]:
        if self.ConsumeBool():
            return self.ConsumeIntInRange(min, max)
        return None
