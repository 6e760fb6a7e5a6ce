"""Shared test fixtures for the crumble test suite."""

from __future__ import annotations

import pytest

from crumble.config import ParserConfig

# ------------------------------------------------------------------
# Sample documents
# ------------------------------------------------------------------

PLAIN_BODY = """Hello user3,

How is the world?
How is the moon?
How are the stars?

Cheers
user4"""

PLAIN_DOCUMENT = (
    """Message-ID: <0123ABCD>
Subject: Hello, world!
Cc: user1@example.com
user2@example.com
To: user3@example.com
From: user4@example.com
Date: 1997-07-16T19:30:30+01:00
X-Mailer: Foo Corp Widgets 12.0.3.1.20 Build 2020040302
type bar
description baz
X-MIMETrack: Serialize by Foo
MIME-Version: 1.0
Content-type: text/plain; charset=US-ASCII

"""
    + PLAIN_BODY
)

MULTIPART_DOCUMENT = """From: John Doe <example@example.com>
MIME-Version: 1.0
Content-Type: multipart/mixed;
    boundary='XXXXboundary text'

--XXXXboundary text
content-type: text/plain

this is the body text

--XXXXboundary text
content-type: text/plain
content-disposition: attachment;
    filename='test.txt'

this is the attachment text

--XXXXboundary text--
"""

PNG_BASE64 = """iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA
60e6kgAAAABJRU5ErkJggg=="""

GMAIL_DOCUMENT = (
    """Return-Path: <example@gmail.com>
Received: from mail-ed1-f43.google.com (mail-ed1-f43.google.com [209.85.208.43])
\tby example.com (OpenSMTPD) with ESMTPS id ecf00d9e
\tfor <example@example.com>;
\tTue, 10 Sep 2019 02:47:32 +0000 (UTC)
Received: by mail-ed1-f43.google.com with SMTP id y91so15364419ede.9
        for <example@example.com>; Mon, 09 Sep 2019 19:47:59 -0700 (PDT)
X-Received: by 2002:a17:906:7e52:: with SMTP id z18mr21792389ejr.114.1568083676851;
 Mon, 09 Sep 2019 19:47:56 -0700 (PDT)
MIME-Version: 1.0
From: Example <example@gmail.com>
Date: Tue, 10 Sep 2019 12:47:31 +1000
Message-ID: <CAMUmi+mvKSB1x93x3su@mail.gmail.com>
Subject: Example
To: example@example.com
Content-Type: multipart/mixed; boundary="0000000000008a01e4059229eec0"

--0000000000008a01e4059229eec0
Content-Type: multipart/alternative; boundary="0000000000008a01e1059229eebe"

--0000000000008a01e1059229eebe
Content-Type: text/plain; charset="UTF-8"

Hello, world!

--0000000000008a01e1059229eebe
Content-Type: text/html; charset="UTF-8"

<div dir="ltr">Hello, world!<br></div>

--0000000000008a01e1059229eebe--
--0000000000008a01e4059229eec0
Content-Type: image/png; name="pixel.png"
Content-Disposition: attachment; filename="pixel.png"
Content-Transfer-Encoding: base64
Content-ID: <f_k0d8idqy0>
X-Attachment-ID: f_k0d8idqy0

"""
    + PNG_BASE64
    + """
--0000000000008a01e4059229eec0--
"""
)

NESTED_DOCUMENT = """Return-Path: <example@gmail.com>
MIME-Version: 1.0
From: Example <example@gmail.com>
Subject: Example
To: example@example.com
Content-Type: multipart/mixed; boundary="boundary_A"

--boundary_A
Content-Type: multipart/alternative; boundary="boundary_B"

Level A
--boundary_B
Content-Type: multipart/alternative; boundary="boundary_C1"

Level B1
--boundary_C1
Content-Type: multipart/alternative; boundary="boundary_D1"

Level C1
--boundary_D1
Content-Type: text/plain; charset="UTF-8"

Level D1

--boundary_D1--
--boundary_C1--
--boundary_B
Content-Type: multipart/alternative; boundary="boundary_C2"

Level B2
--boundary_C2
Content-Type: text/plain; charset="UTF-8"

Level C2

--boundary_C2--
--boundary_B--
--boundary_A--
"""


def build_nested_section(depth: int) -> str:
    """Build a section with *depth* levels of multipart nesting around a leaf."""
    text = "Content-Type: text/plain\n\nleaf\n"
    for level in range(depth, 0, -1):
        boundary = f"lvl{level}x"
        text = (
            f'Content-Type: multipart/mixed; boundary="{boundary}"\n\n'
            f"--{boundary}\n{text}--{boundary}--\n"
        )
    return text


@pytest.fixture
def config() -> ParserConfig:
    return ParserConfig(scan_window=3000, max_depth=64, encoding="utf-8")


@pytest.fixture
def plain_document() -> str:
    return PLAIN_DOCUMENT


@pytest.fixture
def multipart_document() -> str:
    return MULTIPART_DOCUMENT


@pytest.fixture
def gmail_document() -> str:
    return GMAIL_DOCUMENT


@pytest.fixture
def nested_document() -> str:
    return NESTED_DOCUMENT
