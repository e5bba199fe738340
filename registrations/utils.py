import uuid


def generate_txnid():
    # PayU caps txnid at 25 characters
    return f"TXN{uuid.uuid4().hex[:20].upper()}"


def generate_ref_code():
    return f"REF{uuid.uuid4().hex[:10].upper()}"
