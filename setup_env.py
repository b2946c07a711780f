import os
import secrets


def generate_jwt_secret() -> str:
    # 64 bytes of randomness, URL-safe so it can sit unquoted in .env
    return secrets.token_urlsafe(64)


def render_env(example_content: str, jwt_secret: str) -> str:
    """
    Returns the .env.example content with JWT_SECRET filled in
    (appended if the example does not declare it).
    """
    new_lines = []
    found = False
    for line in example_content.splitlines():
        if line.startswith("JWT_SECRET="):
            new_lines.append(f'JWT_SECRET="{jwt_secret}"')
            found = True
        else:
            new_lines.append(line)
    if not found:
        new_lines.append(f'JWT_SECRET="{jwt_secret}"')
    return "\n".join(new_lines) + "\n"


def setup_env():
    if os.path.exists(".env"):
        response = input("A .env file already exists. Overwrite it? (y/N): ")
        if response.lower() != 'y':
            print("Aborted.")
            return

    if not os.path.exists(".env.example"):
        print("Error: .env.example not found.")
        return

    print("Reading .env.example...")
    with open(".env.example", "r") as f:
        env_content = f.read()

    with open(".env", "w") as f:
        f.write(render_env(env_content, generate_jwt_secret()))

    print("SUCCESS: .env file created with a new JWT_SECRET.")

if __name__ == "__main__":
    setup_env()
