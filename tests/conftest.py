def pytest_make_parametrize_id(config, val, argname):
    # pytest builds test IDs with str(), which raises ValueError for ints past
    # the interpreter's int/str conversion digit limit; give those short IDs.
    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 1000:
        return f"{argname}-bigint{val.bit_length()}bits"
    return None
