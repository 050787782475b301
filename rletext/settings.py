from typing import Optional

# Upper bound applied to every run count, None means unbounded.
MAX_RUN_LENGTH: Optional[int] = None

# Largest chunk of expanded output handed to the writer at once.
BLOCKSIZE = 4096
