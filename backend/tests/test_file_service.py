import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from core.errors.notfound import NotFoundError
from core.errors.validate import ValidateError
from database import db
from models import EncryptedPayload, File, SharedLink
from services.file.file_service import FileService, page_offset
from services.file.shared_link_service import SharedLinkService
from services.user.user_service import UserService

PAYLOAD = EncryptedPayload(b"wrapped-key", b"ciphertext", b"0123456789abcdef")


def _upload(owner, recipient, expiration_date, name="report.pdf"):
    return FileService.save_encrypted_file(
        user_id=owner.id,
        file_name=name,
        file_size=4096,
        recipient_user_id=recipient.id,
        password="link-secret",
        expiration_date=expiration_date,
        encrypted_aes_key=PAYLOAD.encrypted_aes_key,
        encrypted_file=PAYLOAD.encrypted_file,
        iv=PAYLOAD.iv,
    )


def _file_count() -> int:
    with db.session_scope() as session:
        return session.query(File).count()


def test_save_encrypted_file_creates_file_and_link(alice, bob, next_week):
    link = _upload(alice, bob, next_week)

    file = FileService.get_file(link.file_id)
    assert file.user_id == alice.id
    assert file.file_name == "report.pdf"
    assert file.file_size == 4096
    assert file.payload == PAYLOAD

    assert link.recipient_user_id == bob.id
    assert link.password == "link-secret"
    assert SharedLinkService.get_shared(link.id, bob.id) is not None


def test_save_encrypted_file_is_atomic(alice, next_week):
    with pytest.raises(IntegrityError):
        FileService.save_encrypted_file(
            user_id=alice.id,
            file_name="orphan.pdf",
            file_size=1,
            recipient_user_id=uuid.uuid4(),
            password="link-secret",
            expiration_date=next_week,
            encrypted_aes_key=b"k",
            encrypted_file=b"f",
            iv=b"i",
        )

    assert _file_count() == 0


def test_save_encrypted_file_large_size(alice, bob, next_week):
    link = FileService.save_encrypted_file(
        user_id=alice.id,
        file_name="disk.img",
        file_size=5 * 1024**4,
        recipient_user_id=bob.id,
        password="link-secret",
        expiration_date=next_week,
        encrypted_aes_key=b"k",
        encrypted_file=b"f",
        iv=b"i",
    )

    assert FileService.get_file(link.file_id).file_size == 5 * 1024**4


def test_get_file_missing():
    assert FileService.get_file(uuid.uuid4()) is None


def test_replace_payload(alice, bob, next_week):
    link = _upload(alice, bob, next_week)
    new_payload = EncryptedPayload(b"rewrapped", b"re-encrypted", b"fedcba9876543210")

    FileService.replace_payload(link.file_id, new_payload)

    assert FileService.get_file(link.file_id).payload == new_payload


def test_replace_payload_rewraps_key_only(alice, bob, next_week):
    link = _upload(alice, bob, next_week)
    rewrapped = EncryptedPayload(b"key-for-new-public-key", PAYLOAD.encrypted_file, PAYLOAD.iv)

    FileService.replace_payload(link.file_id, rewrapped)

    assert FileService.get_file(link.file_id).payload == rewrapped


def test_replace_payload_keeping_iv(alice, bob, next_week):
    link = _upload(alice, bob, next_week)
    new_payload = EncryptedPayload(b"key2", b"ciphertext2", PAYLOAD.iv)

    FileService.replace_payload(link.file_id, new_payload)

    assert FileService.get_file(link.file_id).payload == new_payload


def test_replace_payload_missing_file():
    with pytest.raises(NotFoundError):
        FileService.replace_payload(uuid.uuid4(), PAYLOAD)


def test_delete_file_cascades_to_links(alice, bob, carol, next_week):
    link = _upload(alice, bob, next_week)
    second = SharedLinkService.share_file(link.file_id, carol.id, "other-secret", next_week)

    assert FileService.delete_file(link.file_id) is True

    assert FileService.get_file(link.file_id) is None
    assert SharedLinkService.get_shared(link.id, bob.id) is None
    assert SharedLinkService.get_shared(second.id, carol.id) is None
    assert FileService.delete_file(link.file_id) is False


def test_delete_user_scenario(alice, bob, next_week):
    link = _upload(alice, bob, next_week)

    UserService.delete_user(alice.id)

    assert FileService.get_file(link.file_id) is None
    with db.session_scope() as session:
        assert session.get(SharedLink, link.id) is None


def _link_at(file_id, recipient_id, created_at, expiration_date):
    with db.session_scope() as session:
        link = SharedLink(
            file_id=file_id,
            recipient_user_id=recipient_id,
            password="link-secret",
            expiration_date=expiration_date,
            created_at=created_at,
        )
        session.add(link)
        return link


def test_get_sent_files(alice, bob, carol, next_week):
    base = datetime(2024, 12, 20, 8, 0, tzinfo=timezone.utc)
    first = _upload(alice, bob, next_week, name="a.pdf")
    _link_at(first.file_id, carol.id, base + timedelta(minutes=5), next_week)
    # bob's own upload must not show up in alice's sent list
    _upload(bob, carol, next_week, name="b.pdf")

    files, total = FileService.get_sent_files(alice.id, page=1, limit=10)

    assert total == 2
    assert [f.recipient_email for f in files] == ["bob@example.com", "carol@example.org"]
    assert all(f.file_id == first.file_id for f in files)
    assert all(f.file_name == "a.pdf" for f in files)


def test_get_receive_files(alice, bob, carol, next_week):
    from_alice = _upload(alice, bob, next_week, name="from-alice.pdf")
    from_carol = _upload(carol, bob, next_week, name="from-carol.pdf")
    _upload(alice, carol, next_week, name="not-for-bob.pdf")

    files, total = FileService.get_receive_files(bob.id, page=1, limit=10)

    assert total == 2
    assert {f.file_name: f.sender_email for f in files} == {
        "from-alice.pdf": "alice@example.com",
        "from-carol.pdf": "carol@example.org",
    }
    # the recipient sees link ids, not file ids
    assert {f.file_id for f in files} == {from_alice.id, from_carol.id}


def test_listings_are_newest_first_and_paginated(alice, bob, next_week):
    upload = _upload(alice, bob, next_week)
    base = datetime(2030, 1, 1, tzinfo=timezone.utc)
    for minutes in range(1, 4):
        _link_at(upload.file_id, bob.id, base + timedelta(minutes=minutes), next_week)

    page_one, total = FileService.get_receive_files(bob.id, page=1, limit=2)
    page_two, _ = FileService.get_receive_files(bob.id, page=2, limit=2)
    page_three, _ = FileService.get_receive_files(bob.id, page=3, limit=2)

    assert total == 4
    assert len(page_one) == 2
    assert len(page_two) == 2
    assert page_three == []

    created = [f.created_at for f in page_one + page_two]
    assert created == sorted(created, reverse=True)
    assert upload.id == page_two[-1].file_id


def test_listings_empty(alice):
    assert FileService.get_sent_files(alice.id, page=1, limit=10) == ([], 0)
    assert FileService.get_receive_files(alice.id, page=1, limit=10) == ([], 0)


@pytest.mark.parametrize(
    ("page", "limit", "expected"),
    [
        (1, 10, 0),
        (2, 10, 10),
        (3, 50, 100),
        (1, 1, 0),
    ],
)
def test_page_offset(page, limit, expected):
    assert page_offset(page, limit) == expected


@pytest.mark.parametrize(
    ("page", "limit", "field"),
    [
        (0, 10, "page"),
        (1, 0, "limit"),
        (1, 51, "limit"),
    ],
)
def test_page_offset_rejects_bad_arguments(page, limit, field):
    with pytest.raises(ValidateError) as exc_info:
        page_offset(page, limit)

    assert exc_info.value.field == field


def test_listings_default_to_first_page_of_ten(alice, bob, next_week):
    upload = _upload(alice, bob, next_week)
    for _ in range(11):
        SharedLinkService.share_file(upload.file_id, bob.id, "link-secret", next_week)

    received, received_total = FileService.get_receive_files(bob.id)
    sent, sent_total = FileService.get_sent_files(alice.id)

    assert (len(received), received_total) == (10, 12)
    assert (len(sent), sent_total) == (10, 12)
