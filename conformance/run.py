#!/usr/bin/env python3
"""
JCS Conformance Test Suite (Python)
Tests canonical JSON output, rejection of non-canonicalizable input, and blake3
"""

import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Import from SDK
sys.path.insert(0, str(Path(__file__).parent.parent / 'sdk-py'))
from jcs_sdk import CanonicalConfig, CanonicalizationError, canonicalize_bytes, canonicalize_to_string, hash


def get_logger():
    logger = logging.getLogger("jcs_sdk.conformance")
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        h.setFormatter(fmt)
        logger.addHandler(h)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


log = get_logger()


def run_canonical(vectors, config):
    passed = failed = 0
    for v in vectors:
        try:
            result = canonicalize_to_string(v['input_json'], config)
            if result == v['canonical_output']:
                passed += 1
            else:
                failed += 1
                log.error("[FAIL] CJ-%s: expected=%s, got=%s", v['id'], v['canonical_output'], result)
        except CanonicalizationError as err:
            failed += 1
            log.error("[FAIL] CJ-%s: %s", v['id'], err)
    return passed, failed


def run_rejections(vectors, config):
    passed = failed = 0
    for v in vectors:
        try:
            result = canonicalize_bytes(v['input_json_text'].encode('utf-8'), config)
        except CanonicalizationError as err:
            if err.code == v['error']:
                passed += 1
            else:
                failed += 1
                log.error("[FAIL] REJ-%s: expected %s, got %s", v['id'], v['error'], err.code)
        else:
            failed += 1
            log.error("[FAIL] REJ-%s: expected %s, got output %r", v['id'], v['error'], result)
    return passed, failed


def run_blake3(vectors):
    passed = failed = 0
    for v in vectors:
        result = hash(v['input'].encode('utf-8'))
        if result == v['blake3_hash']:
            passed += 1
        else:
            failed += 1
            log.error("[FAIL] BLAKE3-%s: expected=%s, got=%s", v['id'], v['blake3_hash'], result)
    return passed, failed


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    load_dotenv()
    config = CanonicalConfig.from_env()

    vectors_path = Path(argv[0]) if argv else Path(__file__).parent / 'vectors.json'
    with open(vectors_path, encoding='utf-8') as f:
        vectors = json.load(f)

    sections = [
        ('canonical_json', lambda: run_canonical(vectors.get('canonical_json_fixtures', []), config)),
        ('rejections', lambda: run_rejections(vectors.get('rejection_fixtures', []), config)),
        ('blake3', lambda: run_blake3(vectors.get('blake3_hash_fixtures', []))),
    ]

    total_failed = 0
    for name, run in sections:
        log.info("Testing %s...", name)
        passed, failed = run()
        log.info("%s: %d/%d PASS", name, passed, passed + failed)
        total_failed += failed

    if total_failed == 0:
        print('CONFORMANCE: PASS')
        return 0
    print('CONFORMANCE: FAIL')
    return 1


if __name__ == '__main__':
    sys.exit(main())
