import sys

import atheris

from fuzzing.fuzzed_data_provider import RletextFuzzedDataProvider

with atheris.instrument_imports():
    from fuzzing.utils import FUZZ_MAX_RUN, prepare_rletext_fuzzing
    from rletext.high_level import rle_to_text


def fuzz_one_input(data: bytes) -> None:
    fdp = RletextFuzzedDataProvider(data)

    with fdp.ConsumeMemoryFile(all_data=True) as f:
        text = rle_to_text(f, max_run=FUZZ_MAX_RUN)
    assert isinstance(text, str)


if __name__ == "__main__":
    prepare_rletext_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
