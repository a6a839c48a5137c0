import sys
sys.path.insert(0, '..')

from numstream import NumberParser
import time

# Comma separated numbers arriving a few characters at a time.
# The last one is cut short and fails at end of stream.
stream = "100.0,-42,0.5e-3,6.02E+23,0.0,+7.,1e"


def numbers(chunks):
    parser = NumberParser()
    for chunk in chunks:
        while chunk:
            pos = parser.feed(chunk)
            if not parser.is_complete:
                break
            yield parser.result
            if parser.is_failed:
                return
            parser = NumberParser()
            # skip the separator that ended the number
            chunk = chunk[pos:].lstrip(',')
        time.sleep(0.01)
    parser.finalise()
    yield parser.result


chunks = (stream[i:i+4] for i in range(0, len(stream), 4))
for result in numbers(chunks):
    print(result)
