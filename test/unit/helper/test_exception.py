import validate_mx.helper.exception as mod


def test10_message():
    e = mod.InvArgException("unknown kind: {} ({})", "passport", 3)
    assert str(e) == "unknown kind: passport (3)"
    assert isinstance(e, mod.ValidateMxException)


def test20_hierarchy():
    assert issubclass(mod.ChecksumInvariantError, mod.ValidateMxException)
    assert not issubclass(mod.ChecksumInvariantError, mod.InvArgException)
