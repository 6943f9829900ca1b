from eigenstrat.entries import GenoLine, IndEntry, SnpEntry, genoLineToStr
from eigenstrat.utils import FormatError
from typing import Iterable, List, Tuple

def checkToken(value: str, what: str):
    # the readers split columns on whitespace
    if not isinstance(value, str) or value == "" or any(c.isspace() for c in value):
        raise FormatError(f"{what} must be a non-empty string without whitespace, got {value!r}")

def checkIndEntry(indEntry: IndEntry):
    checkToken(indEntry.name, "individual name")
    checkToken(indEntry.population, f"population name of individual {indEntry.name}")

def writeEigenstratIndFile(indFile: str, indEntries: Iterable[IndEntry]):
    indEntries = list(indEntries)
    for indEntry in indEntries:
        checkIndEntry(indEntry)
    with open(indFile, "w") as f:
        for indEntry in indEntries:
            f.write(f"{indEntry.name}\t{indEntry.sex.value}\t{indEntry.population}\n")

def formatSnpLine(snpEntry: SnpEntry) -> str:
    checkToken(str(snpEntry.chrom), "chromosome")
    snpId = f"{snpEntry.chrom}_{snpEntry.pos}"
    return f"{snpId}\t{snpEntry.chrom}\t0\t{snpEntry.pos}\t{snpEntry.refAllele}\t{snpEntry.altAllele}\n"

class EigenstratWriter:
    """Writes an Eigenstrat dataset, one SNP at a time.

    The individual file is written when the writer is opened. Every call to
    writeEntry appends one line to the snp file and one line to the genotype
    file, so both files always hold the same number of lines.
    """
    def __init__(self, genoFile: str, snpFile: str, indFile: str, indEntries: List[IndEntry]):
        self.genoFileName = genoFile
        self.snpFileName = snpFile
        self.indFileName = indFile
        self.indEntries = list(indEntries)
        self.snpFile = None
        self.genoFile = None

    def __enter__(self):
        writeEigenstratIndFile(self.indFileName, self.indEntries)
        self.snpFile = open(self.snpFileName, "w")
        try:
            self.genoFile = open(self.genoFileName, "w")
        except OSError:
            self.snpFile.close()
            raise
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            self.snpFile.close()
        finally:
            self.genoFile.close()
        return False

    def writeEntry(self, snpEntry: SnpEntry, genoLine: GenoLine):
        if len(genoLine) != len(self.indEntries):
            raise FormatError(f"inconsistent nr of genotypes ({len(genoLine)}, but should be {len(self.indEntries)}) for snp {snpEntry.chrom}_{snpEntry.pos}")
        snpLine = formatSnpLine(snpEntry)
        genoLineStr = genoLineToStr(genoLine) + "\n"
        self.snpFile.write(snpLine)
        self.genoFile.write(genoLineStr)

def writeEigenstrat(genoFile: str, snpFile: str, indFile: str, indEntries: List[IndEntry], entries: Iterable[Tuple[SnpEntry, GenoLine]]):
    with EigenstratWriter(genoFile, snpFile, indFile, indEntries) as writer:
        for snpEntry, genoLine in entries:
            writer.writeEntry(snpEntry, genoLine)
