"""Unit tests for repository content models."""

import pytest

from ..decode import decode
from ..errors import ContentDecodeError, DecodeError
from .content import Contents, DirectoryItem, File, NewFile, Submodule, Symlink


def describe_File():
    def it_keeps_content_encoded_until_asked(file_json):
        file = File.decode(file_json)
        assert file.content.startswith("aGVsbG8")
        assert file.decoded_contents() == b"hello world\n"
        assert file.links.self_ == file_json["_links"]["self"]

    def it_decodes_records_with_unsupported_encodings(payloads):
        file = File.decode(payloads.file(encoding="utf-16"))
        with pytest.raises(ContentDecodeError) as exc_info:
            file.decoded_contents()
        assert exc_info.value.encoding == "utf-16"

    def it_fails_lazily_on_corrupt_content(file_json):
        file_json["content"] = "%%%"
        file = File.decode(file_json)
        with pytest.raises(ContentDecodeError):
            file.decoded_contents()


def describe_Contents():
    def it_dispatches_on_type(file_json):
        assert isinstance(decode(Contents, file_json), File)

    def it_decodes_symlinks(file_json):
        file_json.update(type="symlink", target="/path/to/symlink/target")
        symlink = decode(Contents, file_json)
        assert isinstance(symlink, Symlink)
        assert symlink.target == "/path/to/symlink/target"

    def it_decodes_submodules(file_json):
        file_json.update(type="submodule", submodule_git_url="git://github.com/jquery/qunit.git", download_url=None)
        assert isinstance(decode(Contents, file_json), Submodule)

    def it_rejects_unknown_types(file_json):
        file_json["type"] = "hologram"
        with pytest.raises(DecodeError):
            decode(Contents, file_json)


def describe_DirectoryItem():
    def it_decodes_directory_listings(file_json):
        del file_json["content"]
        del file_json["encoding"]
        dir_json = dict(file_json, type="dir", name="lib", path="lib", download_url=None)
        items = decode(tuple[DirectoryItem, ...], [file_json, dir_json])
        assert [item.item_type.value for item in items] == ["file", "dir"]
        assert items[1].download_url is None


def describe_NewFile():
    def it_base64_encodes_content():
        new_file = NewFile.from_bytes(b"hello world\n", "my commit message")
        assert new_file.encode() == {"message": "my commit message", "content": "aGVsbG8gd29ybGQK"}

    def it_omits_content_for_deletes():
        assert NewFile(message="remove", sha="abc").encode() == {"message": "remove", "sha": "abc"}
