"""Point at the first unrecognized character of a lazy scan."""

from trielex import Tokenizer

source = "head(X) :- body(X), X ! 3."
tokenizer = Tokenizer([":-", "(", ")", ",", "."])

for item in tokenizer.scan(source, source_file="rules.pl"):
    if not item.ok:
        print(f"{item.location}: unrecognized input")
        print(source)
        print(" " * item.offset + "^")
        break
    print(f"{item.kind.name:8} {item.value}")
