"""Split a line into tokens in 3 lines — zero config."""

from trielex import Tokenizer

tokenizer = Tokenizer(["->", "<-", "{", "}"])
print(tokenizer.split("{inst_1 -> inst_2 <- inst_3}"))
