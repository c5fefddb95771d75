"""
Tests for tdnfclient.errors module.
"""
import errno

import pytest

from tdnfclient.constants import (
    ERROR_TDNF_ALREADY_EXISTS,
    ERROR_TDNF_FILE_NOT_FOUND,
    ERROR_TDNF_INVALID_PARAMETER,
    ERROR_TDNF_OUT_OF_MEMORY,
    ERROR_TDNF_PACKAGE_REQUIRED,
    SYSTEM_BASE,
)
from tdnfclient.errors import (
    AlreadyExistsError,
    InvalidParameterError,
    OutOfMemoryError,
    TDNFError,
    TDNFSystemError,
    encode_system_error,
    get_system_error,
    is_system_error,
)
from tdnfclient.models import ApplicationErrorCode, SystemErrorCode


class TestSystemErrorClassifier:
    """Tests for is_system_error / get_system_error / encode_system_error."""

    def test_base_is_not_system(self):
        """Test that SYSTEM_BASE itself is not a system error."""
        assert is_system_error(SYSTEM_BASE) is False

    def test_above_base_is_system(self):
        """Test that codes above SYSTEM_BASE are system errors."""
        assert is_system_error(SYSTEM_BASE + 1) is True
        assert is_system_error(ERROR_TDNF_FILE_NOT_FOUND) is True

    def test_application_codes(self):
        """Test that success and application codes are not system errors."""
        assert is_system_error(0) is False
        assert is_system_error(ERROR_TDNF_PACKAGE_REQUIRED) is False

    def test_decode(self):
        """Test decoding the raw errno."""
        assert get_system_error(SYSTEM_BASE + 1) == 1
        assert get_system_error(ERROR_TDNF_FILE_NOT_FOUND) == errno.ENOENT

    def test_decode_non_system_is_zero(self):
        """Test that decoding a non-system code yields 0."""
        assert get_system_error(SYSTEM_BASE) == 0
        assert get_system_error(ERROR_TDNF_PACKAGE_REQUIRED) == 0

    def test_encode_decode(self):
        """Test that encoding is the inverse of decoding."""
        assert encode_system_error(errno.EACCES) == SYSTEM_BASE + errno.EACCES
        assert get_system_error(encode_system_error(errno.EIO)) == errno.EIO


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_invalid_parameter(self):
        """Test InvalidParameterError code and base class."""
        exc = InvalidParameterError()
        assert isinstance(exc, TDNFError)
        assert exc.code == ERROR_TDNF_INVALID_PARAMETER
        assert exc.error_code == SystemErrorCode(errno.EINVAL)

    def test_out_of_memory(self):
        """Test OutOfMemoryError code."""
        exc = OutOfMemoryError()
        assert exc.code == ERROR_TDNF_OUT_OF_MEMORY
        assert str(exc) == "Out of memory"

    def test_application_error_code(self):
        """Test tagged code for an application error."""
        exc = TDNFError(ERROR_TDNF_PACKAGE_REQUIRED)
        assert exc.error_code == ApplicationErrorCode(ERROR_TDNF_PACKAGE_REQUIRED)
        assert str(exc) == f"tdnf error {ERROR_TDNF_PACKAGE_REQUIRED}"

    def test_system_error_carries_errno(self):
        """Test that TDNFSystemError keeps the raw platform code."""
        exc = TDNFSystemError(errno.ENOENT, '/missing')
        assert exc.errno == errno.ENOENT
        assert exc.code == ERROR_TDNF_FILE_NOT_FOUND
        assert exc.path == '/missing'
        assert 'ENOENT' in str(exc)
        assert '/missing' in str(exc)

    def test_from_oserror(self):
        """Test building from an OSError."""
        os_exc = PermissionError(errno.EACCES, 'Permission denied', '/root/x')
        exc = TDNFSystemError.from_oserror(os_exc)
        assert exc.errno == errno.EACCES
        assert exc.path == '/root/x'

    def test_from_oserror_without_errno(self):
        """Test that an OSError with no errno maps to EIO."""
        exc = TDNFSystemError.from_oserror(OSError('boom'), '/x')
        assert exc.errno == errno.EIO
        assert exc.path == '/x'

    def test_already_exists(self):
        """Test AlreadyExistsError is a system error for EEXIST."""
        exc = AlreadyExistsError('/tmp/a')
        assert isinstance(exc, TDNFSystemError)
        assert exc.errno == errno.EEXIST
        assert exc.code == ERROR_TDNF_ALREADY_EXISTS

    def test_catchable_as_base(self):
        """Test that all errors can be caught as TDNFError."""
        with pytest.raises(TDNFError):
            raise AlreadyExistsError('/tmp/a')
