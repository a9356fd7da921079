"""
Tests for retrieval errors.
"""

from dartpkg_info.errors import PackageDecodeError, RetrievalError


def test_retrieval_error_with_status_code():
    """Test the message when a status code was captured."""
    error = RetrievalError("foo", status_code=404)

    assert str(error) == "Failed to retrieve package:foo information with a status code of 404!"
    assert error.package_name == "foo"
    assert error.status_code == 404


def test_retrieval_error_without_status_code():
    """Test the message when no status code was captured."""
    error = RetrievalError("foo")

    assert str(error) == "Failed to retrieve package:foo information!"
    assert error.status_code is None


def test_decode_error_is_not_a_retrieval_error():
    """Test that decode failures are a separate error type."""
    error = PackageDecodeError("foo", "response is not a JSON object")

    assert not isinstance(error, RetrievalError)
    assert "foo" in str(error)
    assert "not a JSON object" in str(error)
