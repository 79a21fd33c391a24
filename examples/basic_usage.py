"""Basic usage example for the JCS SDK."""

from jcs_sdk import (
    CanonicalizationError,
    canonicalize,
    canonicalize_bytes,
    hash_value,
    validate_integrity,
)


def main():
    print("JCS SDK - Basic Usage Example")
    print("=" * 50)

    # An audit record as a governance client might build it
    record = {
        "tenant": "acme",
        "decision": {"outcome": "allow", "policy": "spend-limit-v2"},
        "amount": 125.50,
        "actors": ["agent-7", "reviewer-2"],
    }

    print("\n1. Canonical bytes...")
    canonical = canonicalize(record)
    print(f"   {canonical.decode('utf-8')}")

    print("\n2. Digest of the canonical form...")
    print(f"   blake3: {hash_value(record)}")
    print(f"   sha256: {hash_value(record, 'sha256')}")

    print("\n3. Re-normalizing third-party JSON...")
    received = b'{ "amount": 125.5, "tenant": "acme",\n  "decision": {"policy": "spend-limit-v2", "outcome": "allow"},\n  "actors": ["agent-7", "reviewer-2"] }'
    normalized = canonicalize_bytes(received)
    print(f"   same as local record: {normalized == canonical}")

    print("\n4. Integrity checks...")
    print(f"   canonical bytes:  {validate_integrity(canonical)}")
    print(f"   received bytes:   {validate_integrity(received)}")

    print("\n5. Rejected input...")
    try:
        canonicalize({"ratio": float("nan")})
    except CanonicalizationError as e:
        print(f"   {e.code}: {e.message}")

    print("\n" + "=" * 50)


if __name__ == "__main__":
    main()
