"""Example: Streaming a directory of date-coded recordings."""

import hashlib
import sys

from filelist_streamer.reader import FileListReader

if len(sys.argv) < 2:
    print("Usage: python examples/example_local.py <directory>")
    sys.exit(2)

directory = sys.argv[1]

# Files of the matching date range, in stream order
for path in FileListReader.get_list_of_files(directory, "20140215", None):
    print("Will stream:", path)

# Stream everything from 2014-02-15 on
hasher = hashlib.sha256()
length = 0
try:
    with FileListReader(directory, min_datecode=20140215) as reader:
        for chunk in reader.get_stream():
            length += len(chunk)
            hasher.update(chunk)

        print("Stream metadata:", reader.get_metadata())
except OSError as e:
    print(f"Stream failed after {length} bytes: {e}")
    sys.exit(1)

print(f"\n{length} bytes, sha256 {hasher.hexdigest()}")
