from typing import Iterable, List

from blog.schemas.content import Post, RelatedPost


def resolve_related(post: Post, posts: Iterable[Post]) -> List[RelatedPost]:
    """
    Pair each explicitly referenced post with its relation label.
    References to slugs missing from `posts` are dropped.
    """
    by_slug = {}
    for candidate in posts:
        by_slug.setdefault(candidate.slug, candidate)

    related = []
    for ref in post.frontmatter.related_posts:
        target = by_slug.get(ref.slug)
        if target is not None:
            related.append(RelatedPost(post=target, label=ref.relationship.label))
    return related


def unresolved_related(post: Post, posts: Iterable[Post]) -> List[str]:
    known = {candidate.slug for candidate in posts}
    return [ref.slug for ref in post.frontmatter.related_posts if ref.slug not in known]


def similar_by_tags(post: Post, posts: Iterable[Post], limit: int) -> List[Post]:
    """
    Rank other published posts by how many distinct tags they share with
    `post`. Ties keep the order of `posts` (newest first in a snapshot).
    """
    tags = set(post.frontmatter.tags)
    scored = []
    for candidate in posts:
        if candidate.slug == post.slug or candidate.is_draft:
            continue
        shared = len(tags & set(candidate.frontmatter.tags))
        if shared:
            scored.append((shared, candidate))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [candidate for _, candidate in scored[: max(limit, 0)]]
