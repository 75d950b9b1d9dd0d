"""Amazon Kendra client (``awsJson1_1``)."""

from awsjack.base.client import ServiceClient
from awsjack.base.exceptions import (
    AccessDeniedError,
    InternalFailureError,
    ResourceNotFoundError,
    ServiceError,
    ThrottlingError,
    ValidationError,
)
from awsjack.base.operation import Operation
from awsjack.base.protocol import ErrorMarshaller, JsonProtocol

_ERROR_MAP = {
    "AccessDeniedException": AccessDeniedError,
    "ConflictException": ServiceError,
    "InternalServerException": InternalFailureError,
    "InvalidRequestException": ValidationError,
    "ResourceAlreadyExistException": ServiceError,
    "ResourceInUseException": ServiceError,
    "ResourceNotFoundException": ResourceNotFoundError,
    "ResourceUnavailableException": ServiceError,
    "ServiceQuotaExceededException": ServiceError,
    "ThrottlingException": ThrottlingError,
    "ValidationException": ValidationError,
}

OPERATIONS = tuple(
    Operation(name)
    for name in (
        "AssociateEntitiesToExperience",
        "AssociatePersonasToEntities",
        "BatchDeleteDocument",
        "BatchGetDocumentStatus",
        "BatchPutDocument",
        "ClearQuerySuggestions",
        "CreateAccessControlConfiguration",
        "CreateDataSource",
        "CreateExperience",
        "CreateFaq",
        "CreateIndex",
        "CreateQuerySuggestionsBlockList",
        "CreateThesaurus",
        "DeleteAccessControlConfiguration",
        "DeleteDataSource",
        "DeleteExperience",
        "DeleteFaq",
        "DeleteIndex",
        "DeletePrincipalMapping",
        "DeleteQuerySuggestionsBlockList",
        "DeleteThesaurus",
        "DescribeAccessControlConfiguration",
        "DescribeDataSource",
        "DescribeExperience",
        "DescribeFaq",
        "DescribeIndex",
        "DescribePrincipalMapping",
        "DescribeQuerySuggestionsBlockList",
        "DescribeQuerySuggestionsConfig",
        "DescribeThesaurus",
        "DisassociateEntitiesFromExperience",
        "DisassociatePersonasFromEntities",
        "GetQuerySuggestions",
        "GetSnapshots",
        "ListAccessControlConfigurations",
        "ListDataSourceSyncJobs",
        "ListDataSources",
        "ListEntityPersonas",
        "ListExperienceEntities",
        "ListExperiences",
        "ListFaqs",
        "ListGroupsOlderThanOrderingId",
        "ListIndices",
        "ListQuerySuggestionsBlockLists",
        "ListTagsForResource",
        "ListThesauri",
        "PutPrincipalMapping",
        "Query",
        "StartDataSourceSyncJob",
        "StopDataSourceSyncJob",
        "SubmitFeedback",
        "TagResource",
        "UntagResource",
        "UpdateAccessControlConfiguration",
        "UpdateDataSource",
        "UpdateExperience",
        "UpdateIndex",
        "UpdateQuerySuggestionsBlockList",
        "UpdateQuerySuggestionsConfig",
        "UpdateThesaurus",
    )
)

REQUESTS = {op.request_class.__name__: op.request_class for op in OPERATIONS}
globals().update(REQUESTS)


class KendraClient(ServiceClient):
    """Indexes, data sources, FAQs, thesauri, experiences and search queries."""

    SERVICE_NAME = "kendra"
    SERVICE_CLIENT_NAME = "kendra"
    ALLOCATION_TAG = "KendraClient"
    ENDPOINT_PREFIX = "kendra"
    OPERATIONS = OPERATIONS
    protocol = JsonProtocol("AWSKendraFrontendService", ErrorMarshaller(_ERROR_MAP))


__all__ = ["KendraClient", "OPERATIONS", *REQUESTS]
