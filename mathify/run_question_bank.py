import json
import time
from pathlib import Path

import requests

from mathify.config import API_URL, BASE_DIR

ENDPOINT = "/questions"
BANK_FILE = BASE_DIR / "question_bank.json"
OUT_FILE = BASE_DIR / "question_results.json"


def run_bank(cases, base_url=API_URL, delay=0.3, session=requests):
    results = []
    for i, case in enumerate(cases, start=1):
        payload = {"topic": case["topic"], "count": case.get("count", 5)}
        if "seed" in case:
            payload["seed"] = case["seed"]
        print(f"[{i}/{len(cases)}] {payload['topic']}")

        r = session.post(base_url + ENDPOINT, json=payload, timeout=60)
        r.raise_for_status()
        questions = r.json()

        results.append({
            "input": payload,
            "requested": payload["count"],
            "returned": len(questions),
            "types": sorted({q.get("type") for q in questions}),
            "questions": questions,
        })

        if delay:
            time.sleep(delay)  # small delay
    return results


def main(bank_file: Path = BANK_FILE, out_file: Path = OUT_FILE):
    with open(bank_file, "r", encoding="utf-8") as f:
        cases = json.load(f)

    results = run_bank(cases)

    with open(out_file, "w", encoding="utf-8") as f:
        json.dump(results, f, ensure_ascii=False, indent=2)

    short = [r for r in results if r["returned"] < r["requested"]]
    print(f"\nSaved results to {out_file} ({len(short)} short batches)")


if __name__ == "__main__":
    main()
