"""Tests for platform capability selection and behaviour."""

import os
import pytest
from ackrc.platform import (
    PosixPlatform,
    WindowsPlatform,
    detect_platform,
    environ_folder_resolver,
)
from ackrc.utils.errors import AckrcError


class TestDetectPlatform:
    """Test platform selection."""
    
    @pytest.mark.parametrize("name,expected", [("posix", PosixPlatform), ("windows", WindowsPlatform)])
    def test_by_name(self, name, expected):
        """Registry names map to implementations."""
        platform = detect_platform(name)
        
        assert isinstance(platform, expected)
        assert platform.name == name
    
    def test_default_matches_host(self):
        """Without a name the host's os.name decides."""
        expected = WindowsPlatform if os.name == "nt" else PosixPlatform
        
        assert isinstance(detect_platform(), expected)
    
    def test_unknown_platform(self):
        """Unsupported names are rejected."""
        with pytest.raises(AckrcError, match="Unsupported platform: amiga"):
            detect_platform("amiga")


class TestPosixPlatform:
    """Test POSIX capabilities."""
    
    def test_system_path(self):
        """The system rc file is /etc/ackrc unless overridden."""
        assert PosixPlatform().list_system_config_paths() == ["/etc/ackrc"]
        assert PosixPlatform("/opt/etc/ackrc").list_system_config_paths() == ["/opt/etc/ackrc"]
    
    def test_identity_key(self, tmp_path):
        """Identity is the (device, inode) pair."""
        path = tmp_path / "f"
        path.write_text("")
        st = os.stat(path)
        
        assert PosixPlatform().identity_key(str(path)) == (st.st_dev, st.st_ino)
    
    def test_identity_key_missing(self, tmp_path):
        """A missing file has no identity."""
        assert PosixPlatform().identity_key(str(tmp_path / "missing")) is None


class TestWindowsPlatform:
    """Test Windows capabilities."""
    
    def test_common_then_user_appdata(self):
        """Common application data comes before per-user application data."""
        folders = {"COMMON_APPDATA": "C:\\ProgramData", "APPDATA": "C:\\Users\\me\\AppData\\Roaming"}
        platform = WindowsPlatform(folder_resolver=folders.get)
        
        assert platform.list_system_config_paths() == [
            os.path.join("C:\\ProgramData", "ackrc"),
            os.path.join("C:\\Users\\me\\AppData\\Roaming", "ackrc"),
        ]
    
    def test_unresolved_folder_skipped(self):
        """A folder the host cannot resolve contributes no candidate."""
        platform = WindowsPlatform(folder_resolver={"APPDATA": "D:\\roaming"}.get)
        
        assert platform.list_system_config_paths() == [os.path.join("D:\\roaming", "ackrc")]
    
    def test_identity_key_is_path(self):
        """Without inode support the path string is the identity."""
        platform = WindowsPlatform(folder_resolver=lambda folder_id: None)
        
        assert platform.identity_key("C:\\x\\_ackrc") == "C:\\x\\_ackrc"
    
    def test_environ_folder_resolver(self):
        """Known folders resolve from conventional environment variables."""
        resolve = environ_folder_resolver({"ALLUSERSPROFILE": "C:\\AllUsers", "APPDATA": "C:\\Roaming"})
        
        assert resolve("COMMON_APPDATA") == "C:\\AllUsers"
        assert resolve("APPDATA") == "C:\\Roaming"
        assert resolve("LOCAL_APPDATA") is None
    
    def test_environ_folder_resolver_prefers_programdata(self):
        """ProgramData wins over ALLUSERSPROFILE."""
        resolve = environ_folder_resolver({"ProgramData": "C:\\ProgramData", "ALLUSERSPROFILE": "C:\\AllUsers"})
        
        assert resolve("COMMON_APPDATA") == "C:\\ProgramData"
