from dataclasses import dataclass

import pytest


@pytest.fixture
def lambda_context():
    """Logger.inject_lambda_context が参照する属性だけを持つ LambdaContext"""

    @dataclass
    class LambdaContext:
        function_name: str = "reserve"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:reserve"
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()
