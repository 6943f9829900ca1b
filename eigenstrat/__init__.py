from eigenstrat.entries import Chrom, GenoLine, GenotypeCall, IndEntry, Sex, SnpEntry
from eigenstrat.genotype_data import (EigenstratGenotypeData, readEigenstrat, readEigenstratInd,
    readEigenstratSnp, readEigenstratSnpFile, readEigenstratSnpStdIn, readEigenstratGeno,
    readEigenstratGenoFile, validateGenoLines, zipSnpGeno)
from eigenstrat.utils import EigenstratError, FormatError
from eigenstrat.writer import EigenstratWriter, writeEigenstrat, writeEigenstratIndFile
