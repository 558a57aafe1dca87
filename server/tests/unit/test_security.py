"""Unit tests for password hashing."""

from tourism_api.core.security import BCRYPT_MAX_BYTES, hash_password, verify_password


def test_hash_is_not_plaintext():
    """Test that the stored hash never contains the password."""
    hashed = hash_password("s3cret-pass", rounds=4)

    assert "s3cret-pass" not in hashed
    assert hashed.startswith("$2")


def test_verify_accepts_correct_password():
    """Test that the original password verifies."""
    hashed = hash_password("s3cret-pass", rounds=4)

    assert verify_password("s3cret-pass", hashed) is True


def test_verify_rejects_wrong_password():
    """Test that a different password is rejected."""
    hashed = hash_password("s3cret-pass", rounds=4)

    assert verify_password("s3cret-pasS", hashed) is False


def test_hashes_are_salted():
    """Test that hashing the same password twice yields different hashes."""
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_verify_rejects_malformed_hash():
    """Test that a stored value that is not a bcrypt hash never verifies."""
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_long_passwords_are_truncated_consistently():
    """Test that passwords beyond the bcrypt limit hash and verify instead of failing."""
    password = "ж" * BCRYPT_MAX_BYTES
    hashed = hash_password(password, rounds=4)

    assert verify_password(password, hashed) is True


def test_default_rounds_come_from_settings():
    """Test that the configured cost factor is used when none is given."""
    hashed = hash_password("pw")

    # $2b$04$... with BCRYPT_ROUNDS=4 in the test environment
    assert hashed.split("$")[2] == "04"
