import pytest

from updock.core.errors import InvalidImageError
from updock.models.image import Image
from updock.utils.dockerfile_parser import FromStatement, parse_dockerfile

DOCKERFILE = '''\
# updock pattern: "<!>.<>"
FROM ubuntu:14.04 AS build

RUN make

FROM scratch

# updock pattern: "<!>.<>.<>-alpine"
# some other comment

FROM --platform=linux/amd64 node:18.1.0-alpine
'''


def test_finds_annotated_from_statements():
    assert parse_dockerfile(DOCKERFILE) == [
        FromStatement(image=Image.parse("ubuntu:14.04"), pattern="<!>.<>", line=2),
        FromStatement(image=Image.parse("node:18.1.0-alpine"), pattern="<!>.<>.<>-alpine", line=11),
    ]


def test_pattern_only_applies_to_the_next_instruction():
    text = '# updock pattern: "<>"\nRUN echo\nFROM alpine:3\n'
    assert parse_dockerfile(text) == []


def test_unannotated_dockerfile():
    assert parse_dockerfile("FROM ubuntu:18.04\nRUN true\n") == []


def test_lowercase_instruction():
    statements = parse_dockerfile('# Updock Pattern: "<>"\nfrom alpine:3\n')
    assert [str(s.image) for s in statements] == ["alpine:3"]


def test_invalid_annotated_image():
    with pytest.raises(InvalidImageError, match="line 2"):
        parse_dockerfile('# updock pattern: "<>"\nFROM quay.io/org/app:1\n')
