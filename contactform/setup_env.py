"""
Interactive generator for the backend's .env file.

Run with:
    contactform-setup            (writes ./.env)
    contactform-setup --path deploy/.env
"""

import argparse
import os
import sys

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/cove-childcare"
DEFAULT_EMAIL_HOST = "smtp.gmail.com"
DEFAULT_EMAIL_PORT = "587"
DEFAULT_EMAIL_SECURE = "false"
DEFAULT_CONTACT_EMAIL = "Contract@covechildcare.co.uk"

ENV_TEMPLATE = """# Server Configuration
PORT=5000

# MongoDB Connection
MONGODB_URI={mongodb_uri}

# Email Configuration
EMAIL_HOST={email_host}
EMAIL_PORT={email_port}
EMAIL_SECURE={email_secure}
EMAIL_USER={email_user}
EMAIL_PASS={email_pass}
CONTACT_EMAIL={contact_email}
"""


def ask(prompt, default=None, input_func=input):
    suffix = f" (default: {default})" if default else ""
    answer = input_func(f"{prompt}{suffix}: ").strip()
    return answer or default or ""


def collect_config(input_func=input):
    """
    Prompt for every setting.

    Returns:
        dict: Template values, or None when a required answer is missing
    """
    config = {
        "mongodb_uri": ask("MongoDB URI", DEFAULT_MONGODB_URI, input_func),
        "email_host": ask("Email host", DEFAULT_EMAIL_HOST, input_func),
        "email_port": ask("Email port", DEFAULT_EMAIL_PORT, input_func),
        "email_secure": ask("Email secure (true/false)", DEFAULT_EMAIL_SECURE, input_func),
    }

    config["email_user"] = ask("Email user", input_func=input_func)
    if not config["email_user"]:
        print("\n❌ Email user is required.")
        return None

    config["email_pass"] = ask("Email password", input_func=input_func)
    if not config["email_pass"]:
        print("\n❌ Email password is required.")
        return None

    config["contact_email"] = ask("Contact email", DEFAULT_CONTACT_EMAIL, input_func)
    return config


def main(argv=None, input_func=input):
    parser = argparse.ArgumentParser(description="Create the .env file for the contact form backend.")
    parser.add_argument("--path", default=".env", help="Where to write the env file (default: .env)")
    args = parser.parse_args(argv)

    print("=== Contact Form Backend Setup ===")
    print("This script will help you set up your backend server.")

    if os.path.exists(args.path):
        print(f"\n⚠️ {args.path} already exists. Do you want to overwrite it? (y/n)")
        if input_func("> ").strip().lower() != "y":
            print(f"\n✅ Setup cancelled. Your existing {args.path} was preserved.")
            return 0

    print("\n📝 Please enter your configuration details:")
    config = collect_config(input_func)
    if config is None:
        return 1

    with open(args.path, "w", encoding="utf-8") as f:
        f.write(ENV_TEMPLATE.format(**config))

    print(f"\n✅ {args.path} created successfully!")
    print("Start the server with: contactform-server")
    return 0


if __name__ == "__main__":
    sys.exit(main())
