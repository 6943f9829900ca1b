import sys
from eigenstrat.entries import GenoLine, IndEntry, SnpEntry, genoLineToStr
from eigenstrat.parsers import consumeLines, parseGenoLine, parseIndLine, parseSnpLine
from eigenstrat.utils import FormatError
from typing import Generator, Iterable, List, Tuple

EigenstratEntry = Tuple[SnpEntry, GenoLine]

def readEigenstratInd(indFile: str) -> List[IndEntry]:
    with open(indFile, "r") as f:
        return list(consumeLines(parseIndLine, f, skipBlank=True))

def readEigenstratSnp(lines: Iterable[str]) -> Generator[SnpEntry, None, None]:
    yield from consumeLines(parseSnpLine, lines, skipBlank=True)

def readEigenstratSnpFile(snpFile: str) -> Generator[SnpEntry, None, None]:
    with open(snpFile, "r") as f:
        yield from readEigenstratSnp(f)

def readEigenstratSnpStdIn() -> Generator[SnpEntry, None, None]:
    yield from readEigenstratSnp(sys.stdin)

def readEigenstratGeno(lines: Iterable[str]) -> Generator[GenoLine, None, None]:
    yield from consumeLines(parseGenoLine, lines)

def readEigenstratGenoFile(genoFile: str) -> Generator[GenoLine, None, None]:
    with open(genoFile, "r") as f:
        yield from readEigenstratGeno(f)

def validateGenoLines(genoLines: Iterable[GenoLine], nrInds: int) -> Generator[GenoLine, None, None]:
    for genoLine in genoLines:
        if len(genoLine) != nrInds:
            raise FormatError(f"inconsistent nr of genotypes ({len(genoLine)}, but should be {nrInds}) in genotype line {genoLineToStr(genoLine)}")
        yield genoLine

def zipSnpGeno(snpEntries: Iterable[SnpEntry], genoLines: Iterable[GenoLine], strict: bool = False) -> Generator[EigenstratEntry, None, None]:
    """Pair SNP entries with genotype lines in file order.

    By default iteration stops as soon as either input runs out and the rest of
    the longer input is never read. With strict=True, inputs of different
    length raise a FormatError instead. Both inputs are closed when the
    pairing ends, so generators reading from files release their handles.
    """
    snpIter = iter(snpEntries)
    genoIter = iter(genoLines)
    nr = 0
    try:
        while True:
            snpEntry = next(snpIter, None)
            if snpEntry is None:
                if strict and next(genoIter, None) is not None:
                    raise FormatError(f"genotype file has more lines than the snp file ({nr} snp entries)")
                return
            genoLine = next(genoIter, None)
            if genoLine is None:
                if strict:
                    raise FormatError(f"snp file has more lines than the genotype file ({nr} genotype lines)")
                return
            nr += 1
            yield snpEntry, genoLine
    finally:
        for it in (snpIter, genoIter):
            close = getattr(it, "close", None)
            if close is not None:
                close()

class EigenstratGenotypeData:
    def __init__(self, genoFile: str, snpFile: str, indFile: str, strict: bool = False):
        self.indData: List[IndEntry] = readEigenstratInd(indFile)
        self.genoFileName = genoFile
        self.snpFileName = snpFile
        self.strict = strict

    def getIndividuals(self) -> List[IndEntry]:
        return self.indData

    def iterateGenotypeData(self) -> Generator[EigenstratEntry, None, None]:
        with open(self.snpFileName, "r") as snpFile:
            with open(self.genoFileName, "r") as genoFile:
                snpEntries = readEigenstratSnp(snpFile)
                genoLines = validateGenoLines(readEigenstratGeno(genoFile), len(self.indData))
                yield from zipSnpGeno(snpEntries, genoLines, self.strict)

def readEigenstrat(genoFile: str, snpFile: str, indFile: str, strict: bool = False) -> Tuple[List[IndEntry], Generator[EigenstratEntry, None, None]]:
    gd = EigenstratGenotypeData(genoFile, snpFile, indFile, strict)
    return gd.getIndividuals(), gd.iterateGenotypeData()
