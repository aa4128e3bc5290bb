"""
Demo user directory.

Plaintext passwords exist only here; InMemoryUserRepository hashes them on
load and never keeps the clear text.
"""

SEED_USERS = [
    {
        "user_id": 1,
        "username": "john_renter",
        "password": "password123",
        "email": "john@example.com",
        "full_name": "John Doe",
        "legal_sin_or_bn": "123-45-6789",
        "phone": "416-555-0001",
        "role_id": 1,
        "profile_type": "Individual",
        "status": "verified",
        "properties": [],
        "created_at": "2025-01-15T00:00:00",
    },
    {
        "user_id": 2,
        "username": "alice_lease",
        "password": "leasepass456",
        "email": "alice@corporate.com",
        "full_name": "Alice Chen",
        "legal_sin_or_bn": "987-65-4321",
        "phone": "416-555-0002",
        "role_id": 2,
        "profile_type": "Corporate",
        "status": "verified",
        "properties": [],
        "created_at": "2024-06-01T00:00:00",
    },
    {
        "user_id": 3,
        "username": "mr_owner",
        "password": "owner789",
        "email": "owner@property.com",
        "full_name": "Mr. Property Owner",
        "legal_sin_or_bn": "456-78-9123",
        "phone": "416-555-0003",
        "role_id": 3,
        "profile_type": "Individual",
        "status": "verified",
        "properties": [1, 2, 3],
        "created_at": "2023-01-01T00:00:00",
    },
    {
        "user_id": 4,
        "username": "admin_manager",
        "password": "asade123",
        "email": "manager@dingdong.com",
        "full_name": "Building Manager",
        "legal_sin_or_bn": "789-01-2345",
        "phone": "416-555-0004",
        "role_id": 8,
        "profile_type": "Individual",
        "status": "verified",
        "properties": [],
        "created_at": "2022-01-01T00:00:00",
    },
    {
        "user_id": 5,
        "username": "social_housing_mgr",
        "password": "social123",
        "email": "nonprofit@housing.ca",
        "full_name": "Sarah Johnson",
        "legal_sin_or_bn": "12-34567890",
        "phone": "416-555-0005",
        "role_id": 7,
        "profile_type": "NGO",
        "status": "verified",
        "properties": [2],
        "created_at": "2024-01-01T00:00:00",
    },
    {
        "user_id": 6,
        "username": "system_admin",
        "password": "admin123",
        "email": "admin@dingdong.com",
        "full_name": "System Administrator",
        "legal_sin_or_bn": "999-99-9999",
        "phone": "416-555-0006",
        "role_id": 11,
        "profile_type": "Individual",
        "status": "verified",
        "properties": [],
        "created_at": "2025-01-01T00:00:00",
    },
    {
        "user_id": 7,
        "username": "corporate_mgr",
        "password": "corporate456",
        "email": "manager@realestategroup.com",
        "full_name": "Corporate Property Manager",
        "legal_sin_or_bn": "12-3456789",
        "phone": "416-555-0007",
        "role_id": 4,
        "profile_type": "Corporate",
        "status": "verified",
        "properties": [1, 3],
        "created_at": "2023-06-01T00:00:00",
    },
]
