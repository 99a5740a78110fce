"""Fixed configuration constants for cryptoprobe."""

# Alternate provider, resolved by dotted module path
ALTERNATE_PROVIDER = "pqcrypto.kem.ml_kem_768"

# Reference algorithm and minimum key length (bits) for the unlimited strength check
UNLIMITED_STRENGTH_ALGORITHM = "AES"
UNLIMITED_STRENGTH_MINIMUM_KEY_LENGTH = 128

# Key length a policy reports when it imposes no limit
UNLIMITED_KEY_LENGTH = 2_147_483_647

# Assertion failure messages
PROVIDER_MISSING_MESSAGE = "System not deemed secure enough : alternate provider missing"
KEY_LENGTH_INSUFFICIENT_MESSAGE = "System not deemed secure enough : key-length policy insufficient"
