"""Line grammars for the three Eigenstrat files.

Each parser consumes exactly one line of text (with or without its line
terminator) and returns one entry, or raises a FormatError at the first
character that does not fit.
"""
from eigenstrat.entries import Chrom, GenoLine, IndEntry, Sex, SnpEntry, REF_ALLELES, ALT_ALLELES, genoLineFromStr
from eigenstrat.utils import FormatError
from typing import Callable, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

SPACE = " \t"
GENO_DIGITS = "0129"

class LineScanner:
    def __init__(self, line: str, lineNr: Optional[int] = None):
        self.line = line
        self.lineNr = lineNr
        self.pos = 0
        if line.endswith("\r\n"):
            self.end = len(line) - 2
        elif line.endswith("\n"):
            self.end = len(line) - 1
        else:
            self.end = len(line)

    def fail(self, expected: str):
        where = f"line {self.lineNr}, column {self.pos + 1}" if self.lineNr is not None else f"column {self.pos + 1}"
        if self.pos < self.end:
            found = repr(self.line[self.pos])
        else:
            found = "end of line"
        text = self.line[:self.end]
        raise FormatError(f"{where}: expected {expected} but found {found} in line {text!r}")

    def atEnd(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> str:
        return "" if self.atEnd() else self.line[self.pos]

    def skipSpace(self):
        while not self.atEnd() and self.line[self.pos] in SPACE:
            self.pos += 1

    def skipSpace1(self):
        if self.peek() == "" or self.peek() not in SPACE:
            self.fail("whitespace")
        self.skipSpace()

    def word(self, what: str) -> str:
        start = self.pos
        while not self.atEnd() and not self.line[self.pos].isspace():
            self.pos += 1
        if self.pos == start:
            self.fail(what)
        return self.line[start:self.pos]

    def char(self, allowed: str, what: str) -> str:
        c = self.peek()
        if c == "" or c not in allowed:
            self.fail(f"{what} (one of {', '.join(allowed)})")
        self.pos += 1
        return c

    def decimal(self, what: str) -> int:
        start = self.pos
        while not self.atEnd() and self.line[self.pos] in "0123456789":
            self.pos += 1
        if self.pos == start:
            self.fail(what)
        return int(self.line[start:self.pos])

    def takeWhile1(self, allowed: str, what: str) -> str:
        start = self.pos
        while not self.atEnd() and self.line[self.pos] in allowed:
            self.pos += 1
        if self.pos == start:
            self.fail(what)
        return self.line[start:self.pos]

    def endOfLine(self):
        if not self.atEnd():
            self.fail("end of line")

def isBlank(line: str) -> bool:
    return line.strip() == ""

def parseSex(scanner: LineScanner) -> Sex:
    return Sex(scanner.char("MFU", "sex"))

def parseIndLine(line: str, lineNr: Optional[int] = None) -> IndEntry:
    s = LineScanner(line, lineNr)
    s.skipSpace()
    name = s.word("individual name")
    s.skipSpace1()
    sex = parseSex(s)
    s.skipSpace1()
    population = s.word("population name")
    s.endOfLine()
    return IndEntry(name=name, sex=sex, population=population)

def parseSnpLine(line: str, lineNr: Optional[int] = None) -> SnpEntry:
    s = LineScanner(line, lineNr)
    s.skipSpace()
    s.word("SNP id")
    s.skipSpace1()
    chrom = s.word("chromosome")
    s.skipSpace1()
    s.word("genetic position")
    s.skipSpace1()
    pos = s.decimal("physical position")
    s.skipSpace1()
    ref = s.char(REF_ALLELES, "reference allele")
    s.skipSpace1()
    alt = s.char(ALT_ALLELES, "alternative allele")
    s.endOfLine()
    return SnpEntry(chrom=Chrom(chrom), pos=pos, refAllele=ref, altAllele=alt)

def parseGenoLine(line: str, lineNr: Optional[int] = None) -> GenoLine:
    s = LineScanner(line, lineNr)
    digits = s.takeWhile1(GENO_DIGITS, "genotype digit")
    s.endOfLine()
    return genoLineFromStr(digits)

def consumeLines(parser: Callable[[str, Optional[int]], T], lines: Iterable[str], skipBlank: bool = False) -> Iterator[T]:
    for lineNr, line in enumerate(lines, 1):
        if skipBlank and isBlank(line):
            continue
        yield parser(line, lineNr)
