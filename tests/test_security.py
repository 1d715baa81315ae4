from security import ALGORITHM, hash_password, verify_password


def test_hash_is_salted():
    first = hash_password("secret")
    second = hash_password("secret")
    assert first != second
    assert first.startswith(f"{ALGORITHM}$")


def test_verify_round_trip():
    encoded = hash_password("secret", iterations=1000)
    assert verify_password("secret", encoded) is True
    assert verify_password("Secret", encoded) is False


def test_same_salt_is_deterministic():
    salt = b"0123456789abcdef"
    assert hash_password("pw", iterations=1000, salt=salt) == hash_password("pw", iterations=1000, salt=salt)


def test_unrecognised_values_never_verify():
    assert verify_password("password", "password") is False
    assert verify_password("pw", "md5$1$abc$def") is False
    assert verify_password("pw", "pbkdf2_sha256$many$abc$def") is False


def test_non_positive_iteration_counts_never_verify():
    assert verify_password("abc", "pbkdf2_sha256$0$YWJj$ZGVm") is False
    assert verify_password("abc", "pbkdf2_sha256$-5$YWJj$ZGVm") is False


def test_truncated_digest_never_verifies():
    algorithm, iterations, salt, digest = hash_password("pw", iterations=1000).split("$")
    assert verify_password("pw", "$".join((algorithm, iterations, salt, digest[:8]))) is False
