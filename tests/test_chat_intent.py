from __future__ import annotations

import pytest

from shopbridge.core.chat.intent import detect_intent, echo_body, extract_email, extract_order_number


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("where is order 4521?", "4521"),
        ("Order #4521 please", "4521"),
        ("order no. 98765", "98765"),
        ("order number 123", "123"),
        ("my #0042 hasn't arrived", "0042"),
        ("ORDER4521", "4521"),
        ("order 12", None),
        ("order 12345678901", None),
        ("I bought 4521 things", None),
        ("order 111 and order 222", "111"),
        ("order \u0664\u0665\u0662\u0661", None),
        ("order \uff14\uff15\uff12\uff11", None),
    ],
)
def test_extract_order_number(message, expected) -> None:
    assert extract_order_number(message) == expected


def test_extract_email_takes_first_match_lowercased() -> None:
    assert extract_email("mail Foo.Bar+x@Shop.Example.COM or other@a.io") == "foo.bar+x@shop.example.com"
    assert extract_email("no email here @ all") is None


def test_detect_intent_flags_complete_and_partial() -> None:
    both = detect_intent("order 4521 foo@bar.com")
    only_email = detect_intent("foo@bar.com")
    neither = detect_intent("hello")

    assert both.complete and not both.partial
    assert only_email.partial and not only_email.complete
    assert not neither.partial and not neither.complete


def test_echo_body_requires_leading_marker() -> None:
    assert echo_body("test: hello") == "hello"
    assert echo_body("TEST:   shout ") == "shout"
    assert echo_body("this is a test: no") is None


def test_email_ignores_non_ascii_letters_in_top_level_domain() -> None:
    # KELVIN SIGN folds to "k" under unicode case-insensitive matching
    assert extract_email("write to a@b.KK") is None
    assert detect_intent("order ٤٥٢١ foo@bar.com").partial
