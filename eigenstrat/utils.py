class EigenstratError(Exception):
    pass

class FormatError(EigenstratError):
    pass

def checkDuplicates(list_, entityName):
    seen = []
    for m in list_:
        if m in seen:
            raise EigenstratError(f"duplicate {entityName} {m}")
        seen.append(m)
