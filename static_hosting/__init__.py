"""Static site hosting on S3 and CloudFront, defined with the AWS CDK."""
