import asyncio

from workers.tasks import _sync


if __name__ == "__main__":
    res = asyncio.run(_sync())
    print(f"pushed {res['sent']} looks to recommender")
