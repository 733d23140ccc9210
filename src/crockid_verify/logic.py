from crockid_core import DecodeError, Uid


def _fail(err: DecodeError) -> dict:
    errors = [err.to_dict()]
    return {"status": "FAIL", "error_count": len(errors), "errors": errors}


def describe(uid: Uid) -> dict:
    return {"id": str(uid), "int": str(uid.to_int()), "hex": uid.to_bytes().hex()}


def verify_id(text: str) -> dict:
    try:
        uid = Uid.from_str(text)
    except DecodeError as e:
        return _fail(e)
    result = {"status": "PASS", "error_count": 0, "errors": []}
    result.update(describe(uid))
    return result
