"""
PayU hash recipes.

The request hash authenticates the payment form we hand to the browser;
the response hash lets us check that a postback really came from PayU.
Both are hex SHA-512 over pipe-joined fields.
"""
import hashlib

from django.utils.crypto import constant_time_compare

UDF_FIELDS = ('udf1', 'udf2', 'udf3', 'udf4', 'udf5')


def _sha512(parts):
    return hashlib.sha512("|".join(parts).encode("utf-8")).hexdigest()


def request_hash(key, salt, txnid, amount, productinfo, firstname, email):
    """
    sha512(key|txnid|amount|productinfo|firstname|email|||||||||||salt)

    The form sends no udf1..udf5 values, so those five slots stay empty
    along with the five reserved ones.
    """
    parts = [key, txnid, amount, productinfo, firstname, email]
    parts += [""] * 10
    parts.append(salt)
    return _sha512(parts)


def response_hash(key, salt, data):
    """
    Reverse hash PayU sends back with every postback:

        sha512([additionalCharges|]salt|status||||||udf5|udf4|udf3|udf2|udf1|
               email|firstname|productinfo|amount|txnid|key)
    """
    parts = []
    if data.get('additionalCharges'):
        parts.append(data['additionalCharges'])
    parts += [salt, data.get('status', '')]
    parts += [""] * 5
    parts += [data.get(name, "") for name in reversed(UDF_FIELDS)]
    parts += [
        data.get('email', ''),
        data.get('firstname', ''),
        data.get('productinfo', ''),
        data.get('amount', ''),
        data.get('txnid', ''),
        key,
    ]
    return _sha512(parts)


def verify_response_hash(key, salt, data):
    received = data.get('hash')
    if not received:
        return False
    return constant_time_compare(received.lower(), response_hash(key, salt, data))
