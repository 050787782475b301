import io
import sys

import atheris

from fuzzing.fuzzed_data_provider import RletextFuzzedDataProvider

with atheris.instrument_imports():
    from fuzzing.utils import FUZZ_MAX_RUN, check_output, prepare_rletext_fuzzing
    from rletext.high_level import rle_to_text_fp


def fuzz_one_input(data: bytes) -> None:
    fdp = RletextFuzzedDataProvider(data)

    max_run = fdp.ConsumeOptionalInt(1, FUZZ_MAX_RUN) or FUZZ_MAX_RUN
    # the decoder accepts any byte stream, so every exception is a bug
    with fdp.ConsumeMemoryFile(all_data=True) as f_in, io.BytesIO() as f_out:
        rle_to_text_fp(f_in, f_out, max_run=max_run)
        check_output(f_out.getvalue())


if __name__ == "__main__":
    prepare_rletext_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
