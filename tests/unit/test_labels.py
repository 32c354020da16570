from pseudonymizer.anonymization.labels import OUTSIDE, TagKind, parse_label


class TestParseLabel:
    def test_begin_prefix(self) -> None:
        parsed = parse_label("B-PER")
        assert parsed.kind is TagKind.BEGIN
        assert parsed.entity_type == "PER"

    def test_inside_prefix(self) -> None:
        parsed = parse_label("I-LOC")
        assert parsed.kind is TagKind.INSIDE
        assert parsed.entity_type == "LOC"

    def test_outside_label(self) -> None:
        parsed = parse_label("O")
        assert parsed.is_outside
        assert parsed.entity_type == OUTSIDE

    def test_empty_label_is_outside(self) -> None:
        assert parse_label("").is_outside

    def test_bare_type_continues_like_inside(self) -> None:
        parsed = parse_label("EMAIL")
        assert parsed.kind is TagKind.INSIDE
        assert parsed.entity_type == "EMAIL"

    def test_prefix_without_type_is_outside(self) -> None:
        assert parse_label("B-").is_outside

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_label(" B-PHONE ").entity_type == "PHONE"

    def test_type_with_underscore_kept_verbatim(self) -> None:
        assert parse_label("I-PHONE_NUM").entity_type == "PHONE_NUM"
