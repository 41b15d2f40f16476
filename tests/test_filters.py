"""
事件过滤单元测试
"""

from gdelt_feed.config import FeedConfig
from gdelt_feed.filters import filter_events, is_event_code_allowed
from gdelt_feed.model import ArticleExtras, ArticleModel, EventModel

PAST = 20230615120000    # 早于 fixed_now
FUTURE = 20230615140000  # 晚于 fixed_now


def _event(event_id, url="https://a.example/1", title="Headline",
           root="19", date_added=PAST, with_article=True):
    article = None
    if with_article:
        article = ArticleModel(document_identifier=url, extras=ArticleExtras(page_title=title))
    return EventModel(global_event_id=event_id, source_url=url, event_root_code=root,
                      date_added=date_added, gkg_article=article)


def _config(**kwargs):
    kwargs.setdefault("allowed_root_codes", [])
    return FeedConfig(**kwargs)


class TestIsEventCodeAllowed:
    """测试根代码允许列表"""

    def test_empty_allows_all(self):
        assert is_event_code_allowed([], "01")
        assert is_event_code_allowed(None, "01")

    def test_membership(self):
        assert is_event_code_allowed(["14", "19"], "19")
        assert not is_event_code_allowed(["14", "19"], "01")


class TestFilterEvents:
    """测试 filter_events"""

    def test_missing_data_excluded(self, fixed_now):
        events = [
            _event(1, url=""),
            _event(2, with_article=False),
            _event(3, title=""),
            _event(4),
        ]
        result = filter_events(events, _config(), now=fixed_now)
        assert [e.global_event_id for e in result] == [4]

    def test_invalid_date_added_excluded(self, fixed_now):
        result = filter_events([_event(1, date_added=0), _event(2)], _config(), now=fixed_now)
        assert [e.global_event_id for e in result] == [2]

    def test_future_events(self, fixed_now):
        events = [_event(1, date_added=FUTURE, url="https://a.example/f"), _event(2)]

        skipped = filter_events(events, _config(skip_future_events=True), now=fixed_now)
        kept = filter_events(events, _config(skip_future_events=False), now=fixed_now)

        assert [e.global_event_id for e in skipped] == [2]
        assert [e.global_event_id for e in kept] == [1, 2]

    def test_event_at_now_is_not_future(self, fixed_now):
        event = _event(1, date_added=int(fixed_now.strftime("%Y%m%d%H%M%S")))
        assert filter_events([event], _config(), now=fixed_now) == [event]

    def test_title_length_in_code_points(self, fixed_now):
        """标题长度按 Unicode 字符计，而不是字节"""
        ok = _event(1, url="https://a.example/1", title="袭" * 150)
        too_long = _event(2, url="https://a.example/2", title="袭" * 151)

        result = filter_events([ok, too_long], _config(max_title_length=150), now=fixed_now)
        assert result == [ok]

    def test_root_code_allow_list(self, fixed_now):
        events = [
            _event(1, url="https://a.example/1", root="14"),
            _event(2, url="https://a.example/2", root="01"),
            _event(3, url="https://a.example/3", root="19"),
        ]
        result = filter_events(events, _config(allowed_root_codes=["14", "19"]), now=fixed_now)
        assert [e.global_event_id for e in result] == [1, 3]

    def test_default_allow_list(self, fixed_now):
        """默认配置只保留冲突类根代码"""
        events = [_event(1, url="https://a.example/1", root="02"), _event(2, url="https://a.example/2", root="18")]
        result = filter_events(events, FeedConfig(), now=fixed_now)
        assert [e.global_event_id for e in result] == [2]

    def test_duplicates(self, fixed_now):
        events = [_event(1), _event(2), _event(3, url="https://a.example/other")]

        deduped = filter_events(events, _config(skip_duplicates=True), now=fixed_now)
        all_kept = filter_events(events, _config(skip_duplicates=False), now=fixed_now)

        assert [e.global_event_id for e in deduped] == [1, 3]
        assert [e.global_event_id for e in all_kept] == [1, 2, 3]

    def test_duplicate_of_excluded_event_is_admitted(self, fixed_now):
        """
        E1 未来事件被排除；E2 标题过长被排除；E3 与 E2 的 URL 相同但标题正常。
        标题长度判断在重复判断之前，E2 没有被记录为已访问，所以 E3 通过。
        """
        e1 = _event(1, url="https://a.example/future", date_added=FUTURE)
        e2 = _event(2, url="https://a.example/dup", title="x" * 151)
        e3 = _event(3, url="https://a.example/dup", title="short title")

        config = _config(skip_future_events=True, skip_duplicates=True, max_title_length=150)
        result = filter_events([e1, e2, e3], config, now=fixed_now)

        assert result == [e3]

    def test_order_and_identity_preserved(self, fixed_now):
        events = [_event(i, url=f"https://a.example/{i}") for i in range(5)]
        result = filter_events(list(reversed(events)), _config(), now=fixed_now)
        assert [e.global_event_id for e in result] == [4, 3, 2, 1, 0]
        assert all(r is e for r, e in zip(result, reversed(events)))

    def test_empty_input(self, fixed_now):
        assert filter_events([], _config(), now=fixed_now) == []

    def test_default_now(self):
        """不传 now 时使用当前 UTC 时间"""
        event = _event(1, date_added=29991231000000)
        assert filter_events([event], _config(skip_future_events=True)) == []

    def test_naive_now_treated_as_utc(self, fixed_now):
        naive_now = fixed_now.replace(tzinfo=None)
        events = [_event(1, date_added=FUTURE, url="https://a.example/f"), _event(2)]
        result = filter_events(events, _config(skip_future_events=True), now=naive_now)
        assert [e.global_event_id for e in result] == [2]

    def test_no_title_length_limit(self, fixed_now):
        event = _event(1, title="x" * 1000)
        assert filter_events([event], _config(max_title_length=None), now=fixed_now) == [event]
