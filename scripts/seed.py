"""Database seeder for manual testing of the comment API."""
import asyncio
import argparse
import random
import time

from comment_api.database import engine, async_session, Base
from comment_api.models import CommentRow, new_comment_id

SLUGS = ["hello-world", "release-notes", "python-tips", "postgres-tuning",
         "async-io", "fastapi-intro", "testing-guide", "deploy-checklist"]
AUTHORS = ["ana", "ben", "chloe", "dmitri", "eve", "farah"]


async def seed(count: int, null_ratio: float, reset: bool):
    print(f"Seeding: {count} comments (~{int(count * null_ratio)} with missing fields)")
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        for i in range(count):
            row = CommentRow(
                id=new_comment_id(),
                slug=random.choice(SLUGS),
                body=f"Comment {i}: thanks for writing this up.",
                author=random.choice(AUTHORS),
            )
            # Leave one text column NULL so the empty-string translation can
            # be checked through the API.
            if random.random() < null_ratio:
                setattr(row, random.choice(["slug", "body", "author"]), None)
            session.add(row)
        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the comments database")
    parser.add_argument("--count", type=int, default=50, help="Number of comments to insert")
    parser.add_argument("--null-ratio", type=float, default=0.1,
                        help="Fraction of rows with one NULL text column")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate the table first")
    args = parser.parse_args()
    asyncio.run(seed(args.count, args.null_ratio, args.reset))


if __name__ == "__main__":
    main()
