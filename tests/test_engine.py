"""
Unit tests for the Cryptex engine and the module-level API.

Tests:
- Registry listing and lookup
- Request validation (unknown cipher, missing key, malformed input)
- CipherResult contents
- Error serialisation
"""

import pytest
from pydantic import ValidationError

import cryptex
from shared.config import AppConfig, CryptexConfig, get_config
from cryptex.core.engine import CryptexEngine
from cryptex.core.errors import (
    CryptexError,
    InvalidKey,
    MalformedInput,
    MissingKey,
    UnknownCipher,
)
from cryptex.core.models import KeyType, Operation


CIPHER_IDS = ["caesar", "rot13", "atbash", "vigenere", "playfair", "rail-fence"]

SAMPLE_KEYS = {
    "caesar": 7,
    "rot13": None,
    "atbash": None,
    "vigenere": "CRYPTEX",
    "playfair": "MONARCHY",
    "rail-fence": 3,
}


class TestRegistry:
    """Tests for listing and looking up ciphers."""

    def test_list_order(self, engine):
        assert [d.id for d in engine.list_ciphers()] == CIPHER_IDS

    def test_descriptor_fields(self, engine):
        descriptors = {d.id: d for d in engine.list_ciphers()}
        assert descriptors["caesar"].key_type is KeyType.NUMERIC
        assert descriptors["vigenere"].key_type is KeyType.TEXTUAL
        assert descriptors["atbash"].key_type is KeyType.NONE
        assert not descriptors["rot13"].has_key
        assert descriptors["rail-fence"].has_key

    def test_every_descriptor_documented(self, engine):
        for desc in engine.list_ciphers():
            assert desc.name
            assert desc.description
            assert desc.details
            assert 1 <= desc.security_level <= 5

    def test_descriptor_is_frozen(self, engine):
        desc = engine.describe("caesar")
        with pytest.raises(ValidationError):
            desc.name = "Changed"

    def test_get_cipher(self, engine):
        assert engine.get_cipher("playfair").id == "playfair"

    def test_unknown_cipher(self, engine):
        with pytest.raises(UnknownCipher) as excinfo:
            engine.get_cipher("enigma")
        assert excinfo.value.cipher_id == "enigma"
        assert excinfo.value.code == "unknown_cipher"


class TestRun:
    """Tests for encrypt/decrypt through the engine."""

    @pytest.mark.parametrize("cipher_id", CIPHER_IDS)
    def test_empty_text_returns_empty(self, engine, cipher_id):
        assert engine.encrypt(cipher_id, "", SAMPLE_KEYS[cipher_id]) == ""
        assert engine.decrypt(cipher_id, "", SAMPLE_KEYS[cipher_id]) == ""

    @pytest.mark.parametrize("cipher_id", ["caesar", "rot13", "atbash", "vigenere"])
    def test_exact_round_trip(self, engine, cipher_id):
        text = "Meet me at the old mill at 9pm, bring the map!"
        key = SAMPLE_KEYS[cipher_id]
        assert engine.decrypt(cipher_id, engine.encrypt(cipher_id, text, key), key) == text

    def test_result_fields(self, engine):
        result = engine.run("caesar", "encrypt", "abc", 1)
        assert result.cipher_id == "caesar"
        assert result.operation is Operation.ENCRYPT
        assert result.input_text == "abc"
        assert result.output_text == "bcd"
        assert result.key == "1"
        assert not result.normalized
        assert result.elapsed_ms >= 0.0
        assert result.summary == "Encrypted 3 characters with caesar -> 3 characters"

    def test_lossy_descriptor_field(self, engine):
        lossy = {d.id: d.lossy for d in engine.list_ciphers()}
        assert lossy == {
            "caesar": False,
            "rot13": False,
            "atbash": False,
            "vigenere": False,
            "playfair": True,
            "rail-fence": True,
        }

    def test_lossy_ciphers_flag_normalized(self, engine):
        assert engine.run("rail-fence", Operation.ENCRYPT, "a b c", 2).normalized
        assert engine.run("playfair", Operation.DECRYPT, "GATL", "MONARCHY").normalized

    def test_key_ignored_for_keyless_cipher(self, engine):
        result = engine.run("rot13", "encrypt", "abc", "ignored")
        assert result.output_text == "nop"
        assert result.key is None

    @pytest.mark.parametrize("cipher_id", ["caesar", "vigenere", "playfair", "rail-fence"])
    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_key(self, engine, cipher_id, key):
        with pytest.raises(MissingKey) as excinfo:
            engine.encrypt(cipher_id, "hello", key)
        assert excinfo.value.cipher_id == cipher_id

    def test_missing_key_checked_before_empty_text(self, engine):
        with pytest.raises(MissingKey):
            engine.encrypt("vigenere", "", None)

    def test_invalid_key_propagates(self, engine):
        with pytest.raises(InvalidKey):
            engine.encrypt("caesar", "hello", "abc")

    def test_unknown_cipher(self, engine):
        with pytest.raises(UnknownCipher):
            engine.encrypt("enigma", "hello", "key")

    def test_non_string_text(self, engine):
        with pytest.raises(MalformedInput):
            engine.encrypt("rot13", b"bytes")

    def test_input_length_limit(self):
        config = AppConfig(cryptex=CryptexConfig(max_input_length=10))
        engine = CryptexEngine(config)
        assert engine.encrypt("rot13", "0123456789") == "0123456789"
        with pytest.raises(MalformedInput):
            engine.encrypt("rot13", "0123456789a")

    def test_playfair_matrix(self, engine):
        assert engine.playfair_matrix("MONARCHY").rows[2] == "EFGIK"


class TestErrors:
    """Tests for the error taxonomy."""

    def test_hierarchy(self):
        for exc_type in (UnknownCipher, MissingKey, InvalidKey, MalformedInput):
            assert issubclass(exc_type, CryptexError)

    def test_to_dict(self):
        err = MissingKey("vigenere")
        assert err.to_dict() == {
            "error": "missing_key",
            "message": "Cipher 'vigenere' requires a key",
            "cipher_id": "vigenere",
        }

    def test_message_is_str(self):
        assert str(UnknownCipher("enigma")) == "Unknown cipher: 'enigma'"


class TestModuleApi:
    """Tests for the package-level convenience functions."""

    def test_encrypt(self):
        assert cryptex.encrypt("caesar", "Hello, World!", 3) == "Khoor, Zruog!"

    def test_decrypt(self):
        assert cryptex.decrypt("vigenere", "Lxfopv ef rnhr", "LEMON") == "Attack at dawn"

    def test_list_ciphers(self):
        assert [d.id for d in cryptex.list_ciphers()] == CIPHER_IDS

    def test_get_cipher(self):
        assert cryptex.get_cipher("atbash").encrypt("abc") == "zyx"

    def test_default_engine_shared(self):
        assert cryptex.default_engine() is cryptex.default_engine()

    def test_default_engine_uses_get_config(self, tmp_path, monkeypatch):
        path = tmp_path / "cryptex.toml"
        path.write_text("[cryptex]\nmax_input_length = 5\n", encoding="utf-8")
        monkeypatch.delattr(cryptex.default_engine, "_cached", raising=False)
        try:
            get_config(path)
            assert cryptex.default_engine().config.cryptex.max_input_length == 5
            with pytest.raises(MalformedInput):
                cryptex.encrypt("rot13", "too long")
        finally:
            for func in (cryptex.default_engine, get_config):
                if hasattr(func, "_cached"):
                    del func._cached
