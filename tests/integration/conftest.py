from pathlib import Path

import pytest

AWS_MD = """\
# AWS Interview Questions

## What is Amazon S3?
S3 is object storage. Buckets hold objects.

```python
import boto3

s3 = boto3.client("s3")
s3.list_buckets()
```

## How do you provision an EC2 instance with Terraform?
Use the `aws_instance` resource.

```hcl
# main.tf
resource "aws_instance" "web" {
  ami           = "ami-123456"
  instance_type = "t3.micro"
}
```
"""

DATABASES_MD = """\
Questions collected from several interviews.

# Databases

## What is an index in SQL?
An index speeds up SQL lookups at the cost of slower writes.

## Explain ACID
Atomicity, consistency, isolation, durability.
"""

PYTHON_MD = """\
# Python

## What is the GIL?
The global interpreter lock lets one thread run Python bytecode at a time.
"""


def _write_tree(root: Path) -> Path:
    root.mkdir()
    (root / "cloud").mkdir()
    (root / "cloud" / "aws.md").write_text(AWS_MD, encoding="utf-8")
    (root / "databases.md").write_text(DATABASES_MD, encoding="utf-8")
    (root / "python.md").write_text(PYTHON_MD, encoding="utf-8")
    return root


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A small interview-notes tree with three Markdown documents."""
    return _write_tree(tmp_path / "notes")


@pytest.fixture
def docs_dir_with_broken_file(docs_dir: Path) -> Path:
    """The same tree plus one document that is not valid UTF-8."""
    (docs_dir / "broken.md").write_bytes(b"# Broken\n\xff\xfe not utf-8\n")
    return docs_dir

