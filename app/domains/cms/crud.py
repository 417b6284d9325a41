# app/domains/cms/crud.py

from app.core.crud_base import CRUDBase
from . import models, schemas


class CRUDResource(CRUDBase[models.Resource, schemas.ResourceCreate, schemas.ResourceUpdate]):
    default_order = (models.Resource.updated_at.desc(), models.Resource.created_at.desc())


class CRUDNotice(CRUDBase[models.Notice, schemas.NoticeCreate, schemas.NoticeUpdate]):
    default_order = (
        models.Notice.published_at.desc(),
        models.Notice.updated_at.desc(),
        models.Notice.created_at.desc(),
    )


class CRUDCmsPage(CRUDBase[models.CmsPage, schemas.CmsPageCreate, schemas.CmsPageUpdate]):
    default_order = (models.CmsPage.slug.asc(),)


resource = CRUDResource(models.Resource)
notice = CRUDNotice(models.Notice)
cms_page = CRUDCmsPage(models.CmsPage)
