import pytest

from marketplace.platform.logging.loguru_io_utils import (
    MASK,
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


class TestMaskSensitive:
    @pytest.mark.parametrize(
        'raw, expected',
        [
            ("password='hunter2'", f"password='{MASK}'"),
            ("{'new_password': 'abc123'}", f"{{'new_password': '{MASK}'}}"),
            ('{"token": "eyJhbGciOi"}', f'{{"token": "{MASK}"}}'),
        ],
    )
    def test_secrets_are_masked(self, raw, expected):
        assert mask_sensitive(raw) == expected

    def test_plain_values_are_returned_unchanged(self):
        data = {'email': 'a@b.com'}

        assert mask_sensitive(data) is data

    def test_keyword_masking(self):
        assert should_mask_keyword('password', 'x') == MASK
        assert should_mask_keyword('email', 'a@b.com') == 'a@b.com'


class TestHelpers:
    def test_long_content_is_truncated(self):
        truncated = truncate_content('x' * 1500)

        assert truncated.startswith('x' * 1000)
        assert truncated.endswith('(1500 chars)')

    def test_unknown_kwargs_are_dropped(self):
        def handler(a, *, b):
            return a, b

        args, kwargs = normalize_args_kwargs(handler, 1, b=2, extra=3)

        assert args == (1,)
        assert kwargs == {'b': 2}
