import os
import sys
import json
import jsonschema
from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version
from eigenstrat.genotype_data import EigenstratGenotypeData
from eigenstrat.utils import EigenstratError, checkDuplicates
from typing import Dict, List

DESCRIPTOR_FILE = "eigenstrat.json"

dataset_schema = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type" : "object",
    "additionalProperties": False,
    "required": ["datasetName", "genotypeData", "version"],
    "properties" : {
        "datasetName" : {"type" : "string"},
        "genotypeData" : {
            "type" : "object",
            "additionalProperties": False,
            "required": ["format", "genoFile", "snpFile", "indFile"],
            "properties" : {
                "format" : {"type": "string", "enum": ["EIGENSTRAT"]},
                "genoFile" : {"type": "string"},
                "snpFile" : {"type": "string"},
                "indFile" : {"type": "string"}
            }
        },
        "notes" : {"type" : "string"},
        "lastUpdate" : {"type" : "string", "format" : "date"},
        "version" : {"type" : "string"}
    }
}

class EigenstratDataset:
    def __init__(self, descriptorFile: str, strict: bool = False):
        with open(descriptorFile, "r") as f:
            jsonObj = json.load(f)
        jsonschema.validate(instance=jsonObj, schema=dataset_schema, format_checker=jsonschema.Draft7Validator.FORMAT_CHECKER)
        self.descriptorFile = descriptorFile
        self.baseDir     = '.' if os.path.dirname(descriptorFile) == '' else os.path.dirname(descriptorFile)
        self.datasetName = jsonObj["datasetName"]
        self.notes       = jsonObj.get("notes", None)
        self.lastUpdate  = jsonObj.get("lastUpdate", None)
        try:
            self.version = Version(jsonObj["version"])
        except InvalidVersion:
            raise EigenstratError(f"invalid version {jsonObj['version']!r} in {descriptorFile}")
        f = jsonObj["genotypeData"]
        genoF = os.path.join(self.baseDir, f["genoFile"])
        snpF = os.path.join(self.baseDir, f["snpFile"])
        indF = os.path.join(self.baseDir, f["indFile"])
        self.genotypeData = EigenstratGenotypeData(genoF, snpF, indF, strict)

def findDatasetFiles(dir: str) -> List[str]:
    return sorted(
        os.path.join(t[0], DESCRIPTOR_FILE)
        for t in os.walk(dir)
        if DESCRIPTOR_FILE in t[2]
    )

def loadDatasets(descriptorFiles: List[str], versionConstraints: Dict[str, str] = {}, strict: bool = False) -> List[EigenstratDataset]:
    datasets = [EigenstratDataset(f, strict) for f in descriptorFiles]
    checkDuplicates([(d.datasetName, d.version) for d in datasets], "dataset")
    for name, constraint in versionConstraints.items():
        try:
            spec = SpecifierSet(constraint)
        except InvalidSpecifier:
            # a bare version means exactly this version
            spec = SpecifierSet(f"=={constraint}")
        matching = [d for d in datasets if d.datasetName == name and d.version in spec]
        if len(matching) == 0:
            raise EigenstratError(f"no version of dataset {name} matches {constraint}")
        datasets = [d for d in datasets if d.datasetName != name or d.version in spec]
    byName: Dict[str, EigenstratDataset] = {}
    for d in datasets:
        if d.datasetName in byName:
            other = byName[d.datasetName]
            newest = d if d.version > other.version else other
            print(f"Warning: found several versions of dataset {d.datasetName}, using version {newest.version} from {newest.descriptorFile}", file=sys.stderr)
            byName[d.datasetName] = newest
        else:
            byName[d.datasetName] = d
    return [d for d in datasets if byName[d.datasetName] is d]
