"""Free-threading safe — one compiled automaton, 1000 scans in parallel."""

from concurrent.futures import ThreadPoolExecutor

from trielex import Tokenizer

tokenizer = Tokenizer(["->", "<-", "(", ")", "{", "=", ",", "}", "[", "|", "]", "*", "."])
sources = [f'(*"{i}" -> int -> *"i".write)' for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenizer.split, sources))

print(f"Scanned {len(results)} inputs in parallel")
print("First:", results[0])
