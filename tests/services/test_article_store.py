"""Article Store — verifies records loaded back from the ORM store."""

import uuid

from replication_order.core.records import ArticleRecord, ArticleTagRecord, TagRecord
from replication_order.models.article import Article
from replication_order.models.article_tag import ArticleTag
from replication_order.models.tag import Tag


async def test_load_articles_returns_records_sorted_by_label(store, seed_articles):
    articles = await store.load_articles()
    assert articles == [
        ArticleRecord(seed_articles["A1"].id, "A1", 1),
        ArticleRecord(seed_articles["A2"].id, "A2", 1),
    ]


async def test_load_links_uses_link_orders(store, seed_articles):
    links = await store.load_links()
    by_article = {link.article_id: link for link in links}
    assert by_article[seed_articles["A1"].id] == ArticleTagRecord(
        seed_articles["A1"].id, seed_articles["T1"].id, 1,
    )
    assert by_article[seed_articles["A2"].id] == ArticleTagRecord(
        seed_articles["A2"].id, seed_articles["T2"].id, 0,
    )


async def test_load_tags_keyed_by_id(store, seed_articles):
    tags = await store.load_tags()
    t1 = seed_articles["T1"]
    assert tags[t1.id] == TagRecord(t1.id, "T1")
    assert len(tags) == 2


async def test_empty_store_loads_nothing(store):
    assert await store.load_articles() == []
    assert await store.load_links() == []
    assert await store.load_tags() == {}


async def test_article_with_several_links(store):
    t1, t2 = Tag(label="T1"), Tag(label="T2")
    article = Article(
        id=uuid.uuid4(), label="Multi", replication_order=10,
        article_tags=[
            ArticleTag(tag=t1, replication_order=2),
            ArticleTag(tag=t2, replication_order=5),
        ],
    )
    await store.add_tags([t1, t2])
    await store.add_articles([article])

    links = await store.load_links()
    assert sorted(link.replication_order for link in links) == [2, 5]
    assert {link.article_id for link in links} == {article.id}
