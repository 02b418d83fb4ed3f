import os

# handlers はモジュール読み込み時に boto3 のリソースを生成するため、
# テスト実行前に最低限の環境変数を用意しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "rental-table-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "rental-test")
